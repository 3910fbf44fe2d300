"""
This package contains all modules related to decoding the byte stream
sent by an Infon game server to GUI clients.

Sub-packages handle specific parts of the format:

- ``masked``: Presence-bitmask optional field decoding.
- ``packets``: Frame headers, per-type layouts and the decoded event types.
"""
