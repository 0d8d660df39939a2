"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive a Database at construction, turn rows into domain
model objects, and persist those objects back.
"""
