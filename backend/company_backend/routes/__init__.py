"""
Company Backend — API Routes Package
=====================================

Route Inventory:
    - department.py: GET/POST/PUT /api/department, DELETE /api/department/{id}
    - employee.py:   GET/POST/PUT /api/employee, DELETE /api/employee/{id},
                     POST /api/employee/savefile
    - health.py:     GET /health

Routes stay thin: read the request, call one service method, shape the
response. Static photos (/Photos) are mounted in main.py.
"""
