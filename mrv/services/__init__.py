from .intake import MRVIntakeService, categorize_file
from .verification import approve_or_reject

__all__ = ["MRVIntakeService", "categorize_file", "approve_or_reject"]
