"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and works on
a :class:`~catalog_api.app.core.store.RecordStore` passed in by the
API layer.  Services raise :class:`~catalog_api.app.core.errors.ApiError`
subclasses for invalid input, missing records and conflicts; they never
build HTTP responses themselves.
"""
