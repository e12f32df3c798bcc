"""
Errors raised by the emoblog write path and moderation sweeps.

Write-path errors subclass Django's ValidationError, so model forms and
the admin render them as ordinary form errors. The REST views turn them
into 400 responses.
"""
from django.core.exceptions import ValidationError


class EntryRejected(ValidationError):
    """
    An entry contradicts the polarity of its parent blog.

    Attributes:
        entity_name: entity the rejection is reported against
        reason: machine-readable reason code
        title: human-readable summary
        marker: the offending emoji tag or content marker, if any
    """

    entity_name = "entry"
    reason = None
    title = None

    def __init__(self, marker=None):
        self.marker = marker
        super().__init__(self.title, code=self.reason)


class InvalidEmoji(EntryRejected):
    reason = "invalidEmoji"
    title = "Invalid Emoji"


class InvalidContent(EntryRejected):
    reason = "invalidContent"
    title = "Invalid Content"


class ParentBlogNotFound(ValidationError):
    """The blog an entry points at does not exist."""

    entity_name = "entry"
    reason = "blogNotFound"
    title = "Blog not found"

    def __init__(self, blog_id=None):
        self.blog_id = blog_id
        super().__init__(self.title, code=self.reason)


class IdAlreadySet(ValidationError):
    reason = "idexists"

    def __init__(self, entity_name):
        self.entity_name = entity_name
        super().__init__(f"A new {entity_name} cannot already have an ID", code=self.reason)


class IdMissing(ValidationError):
    reason = "idnull"

    def __init__(self, entity_name):
        self.entity_name = entity_name
        super().__init__("Invalid id", code=self.reason)


class SweepIncomplete(Exception):
    """
    One or more deletions failed during a sweep.

    Raised only after every candidate was processed; the attached result
    lists what was deleted and what failed.
    """

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"{len(result.failed)} of {len(result.deleted) + len(result.failed)} "
            f"deletions failed during {result.scope.value} sweep"
        )
