"""Impact platform notification service.

Server side notification log, participation request workflow and the polling
client used by the web front-end.
"""
