"""
Fashion Catalog API — Services Layer
=====================================

Business logic between routes (HTTP) and the database.

Service Inventory:
    - RecordService / ItemService: shared CRUD keyed by the public id
    - ProductService: products, category filter, sample-data seeding
    - OfferingService: the `services` table
    - CategoryService: user-managed categories with unique titles
    - StatsService: catalog aggregation
"""
