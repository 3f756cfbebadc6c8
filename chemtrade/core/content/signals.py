"""
Content related, process-internal signals.
"""
from django.dispatch import Signal


# CONTENT_PUBLISHED is sent after ``publish_all_drafts`` has promoted drafts to
# live values in the Repository. With write-behind storage the change may not
# be durable yet when this fires; wait on ``write`` if that matters.
#
# Handlers should be simple and fast. Do not do external web service calls
# here.
#
# providing_args=[
#     'keys',          # list of content keys that were promoted
#     'published_at',  # datetime of the publish
#     'write',         # concurrent.futures.Future for the storage write
# ]
CONTENT_PUBLISHED = Signal()
