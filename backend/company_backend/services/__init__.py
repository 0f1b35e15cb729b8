"""
Company Backend — Services Layer
=================================

What:  Logic between the routes (HTTP) and the database (persistence).

Service Inventory:
    - DepartmentService: CRUD over the Department table
    - EmployeeService:   CRUD over the Employee table
    - PhotoService:      Employee photo upload into the photos directory
    - statements.execute: single-statement runner shared by the CRUD services
"""
