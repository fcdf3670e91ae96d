"""Service layer — runs the contact pipeline and returns ServiceResult."""
