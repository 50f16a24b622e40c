"""
Lift Analyzer

Recording and reporting tools for the cabin's behaviour:
- TripRecorder: cue log, trajectory, trip records, service times,
  JSON Lines event log and travel diagram
"""

__version__ = "0.1.0"

from .trip_recorder import TripRecorder

__all__ = ['TripRecorder']
