"""
HRMS Backend - API Routes Package
==================================

Route Inventory:
    - employees.py:  GET    /employee        (list all employees)
                     POST   /employee        (create an employee)
                     PUT    /employee/{id}   (replace an employee's fields)
                     DELETE /employee/{id}   (delete an employee)
    - health.py:     GET    /health          (service health check)

Routes handle HTTP concerns only: extract input, call the service, wrap the
result in the response envelope.
"""
