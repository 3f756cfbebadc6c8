"""
Storage related, process-internal signals.
"""
from django.dispatch import Signal


# PERSIST_FAILED is sent when a background (write-behind) save of a Repository
# fails. By the time it fires, the API call that caused the write has usually
# already returned successfully to its caller, so this is the only place the
# failure becomes visible besides the log.
#
# It is sent from the writer thread, not the request thread. Handlers should
# be quick and must not touch the Repository that failed.
#
# providing_args=[
#     'repository',  # the Repository instance whose write failed
#     'exception',   # the PersistenceError set on the write's Future
# ]
PERSIST_FAILED = Signal()
