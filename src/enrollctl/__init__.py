"""enrollctl — parse-then-trust enrolment and role-variant user handling."""

__version__ = "0.1.0"
