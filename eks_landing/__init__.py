"""Landing page and liveness endpoint for a FastAPI workload running on EKS."""

__version__ = "0.1.0"
