"""Output layer — human/JSON rendering of ServiceResult and install-file wire bodies."""
