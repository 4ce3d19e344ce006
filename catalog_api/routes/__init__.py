"""
Fashion Catalog API — API Routes Package
=========================================

Route Inventory:
    - products.py:    /api/products, /api/products/{id}, POST /api/products/init-data
    - services.py:    /api/services, /api/services/{id}
    - categories.py:  /api/categories, /api/categories/{id}, GET /api/categories-list
    - stats.py:       GET /api/stats
    - meta.py:        GET /, GET /api/endpoints
    - health.py:      GET /health

Routes stay thin: extract request data, call a service, return a schema.
"""
