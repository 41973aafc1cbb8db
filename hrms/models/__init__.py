"""Document models for the HRMS backend."""
