"""Store functions. Each takes the caller's Session and flushes, never commits.

Committing (or rolling back) is the service layer's job, so several store calls
can form one atomic unit.
"""
