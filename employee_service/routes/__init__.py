# Routes package init
"""
Employee Service: API Routes Package
=======================================

Route Inventory:
    - employees.py: GET/POST /employees, PUT/DELETE /employees/{id},
                    GET /employee/{id}
    - health.py:    GET /  (greeting), GET /health

Routes are THIN: they extract path and body parameters, call the service,
and pick the success status code. Error statuses come from the exception
handlers registered in main.py.
"""
