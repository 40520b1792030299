"""Detection, decoding and pose recovery of square fiducial tags, with serial-line and IMU helpers."""

__version__ = "0.1.0"