"""Time Tracking package.

Feature modules (employees, timelogs) follow a thin Flask controller layer over
service/repository layers. The ``timesheet`` package holds the pure derivation
engine: pairing check events into sessions, daily summaries, timesheet totals
and presence.
"""
