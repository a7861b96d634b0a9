# Services package init
"""
ArticleHub Backend — Services Layer
=====================================

What:  Everything between the HTTP routes and the database driver.

Service Inventory:
    - ArticleStore (protocol): storage capability shared by both backends
    - InMemoryArticleStore: dict-backed store, optionally seeded
    - MongoArticleStore: store over the MongoDB `articles` collection
    - ArticleService: id decoding, one store call, error translation
"""
