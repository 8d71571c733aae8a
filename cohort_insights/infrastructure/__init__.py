"""Infrastructure: persistence adapters, report export and the job scheduler."""
