"""Infrastructure Layer for the back office.

This module provides concrete implementations of the application layer interfaces:
- auth: bcrypt hashing, permissions and the acting employee
- employee: employee data provider and form access policy
- repositories: in-memory employee repository
- monitoring: structured logging
- container: dependency wiring
"""
