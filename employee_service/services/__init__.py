# Services package init
"""
Employee Service: Services Layer
===================================

What:  Database-facing logic sitting between routes (HTTP) and MongoDB.
Why:   Routes handle HTTP; services issue queries and translate driver errors.

Service Inventory:
    - EmployeeService: list, create, update, delete and get-one over the
      `employees` collection
"""
