"""Employee Payroll System package.

Organized by feature modules (employees, payroll) with a thin Flask controller
layer on top of service/repository layers.
"""
