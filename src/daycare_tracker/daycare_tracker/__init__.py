"""Daycare Tracker package.

Attendance check-in/out for a daycare, meal inference from the attendance
window and monthly/annual meal-reimbursement reports. Organized by feature
modules (kids, attendance, rates, reimbursement, ...) with a thin Flask
controller layer over service/repository layers.
"""
