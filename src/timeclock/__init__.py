"""timeclock package.

Employee clock-in/clock-out tracking organized by feature modules (users,
shifts, hours, archive) with a thin Flask controller layer over service and
repository layers.
"""
