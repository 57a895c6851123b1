"""HR attendance computation package.

Raw biometric punches, business rules and per-day adjustments go in; one
attendance record per (employee, local calendar day) comes out. Organized by
feature modules (employees, rules, adjustments, punches, attendance, payroll)
with a thin Flask controller layer over service/repository layers.
"""
