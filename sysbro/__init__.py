"""Linux desktop helpers: autostart entries, file shredding, boot time, parcel tracking, download speed test and skin conversion."""

__version__ = "1.0.0"