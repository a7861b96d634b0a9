# Routes package init
"""
ArticleHub Backend — API Routes Package
=========================================

Route Inventory:
    - home.py:      GET    /                  (plain-text welcome)
    - articles.py:  GET    /articles          (list all articles)
                    POST   /article           (create)
                    GET    /article/{id}      (read one)
                    PUT    /article/{id}      (update name/content)
                    DELETE /article/{id}      (delete)
    - health.py:    GET    /health            (service health check)

Routes stay thin: extract path and body, call ArticleService, shape the
response. Anything else belongs in the service.
"""
