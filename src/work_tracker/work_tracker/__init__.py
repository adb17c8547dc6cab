"""Work Tracker package.

Feature modules (shifts, holidays, payroll, calendar_view) each own a model,
a repository protocol with its MySQL implementation, and a service layer.
Flask controllers stay thin and delegate to the services.
"""
