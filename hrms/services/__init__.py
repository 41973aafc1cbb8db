"""
HRMS Backend - Services Package
================================

What:  The layer between route handlers and the MongoDB collection.

Service Inventory:
    - employee_service.py:  EmployeeService (list, create, update, delete)
"""
