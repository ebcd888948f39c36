"""Service layer — boundary controllers returning ServiceResult."""
