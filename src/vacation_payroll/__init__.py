"""Vacation payroll package.

Feature modules (policy, wages, employees, vacations) with a thin Flask
controller layer on top of service/repository layers. The calculators under
``vacations.calculator`` are pure and never touch the record store.
"""
