"""pmguard - role and group based authorization for project-management resources."""

__version__ = "0.1.0"
