"""Request/response schemas for the HRMS backend."""
