"""Persistence implementations for warden_auth.

This package contains storage-specific implementations of the
repository interfaces defined in warden_auth.repositories.

Structure:
    persistence/
    ├── sqlalchemy/     # SQLAlchemy/SQL database implementation
    └── memory/         # In-process implementation (tests, local runs)

Usage:
    from warden_auth.persistence.sqlalchemy import (
        UserTokenRepositorySQLAlchemy,
        AuthBase,
    )
"""
