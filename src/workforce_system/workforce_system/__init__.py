"""Workforce System package.

Site workforce payroll: workers, daily attendance and wage payments per site,
and the payout/salary-slip computations derived from them. Organized by
feature modules (workers, attendance, payments, payroll) with service and
repository layers around a pure payroll core.
"""
