"""Academic administration backend: authentication and CRUD over the academic schema."""

__version__ = "0.1.0"
