"""Contains the dataclass for the status of a video."""

__all__ = ["Status"]

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self


@dataclass
class Status:
    """Represents the upload, processing and privacy status of a YouTube video.
    The fields are controlled by YouTube and cannot be changed through this
    package.
    """

    upload_status: str | None = None
    """The status of the uploaded video"""

    failure_reason: str | None = None
    """Why the upload failed, if it failed"""

    rejection_reason: str | None = None
    """Why YouTube rejected the video, if it was rejected"""

    privacy_status: str | None = None
    """The privacy status of the video ("public", "private" or "unlisted")"""

    publish_at: datetime | None = None
    """The time when a private video is scheduled to become public"""

    license: str | None = None
    """The license of the video ("youtube" or "creativeCommon")"""

    embeddable: bool = False
    """Whether the video can be embedded on another website"""

    public_stats_viewable: bool = False
    """Whether the extended statistics on the watch page are public"""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Self:
        """Create a Status from the status part of a videos resource.

        :param data: The JSON object of the status.
        :return: The status.
        """
        publish_at = data.get("publishAt")

        return cls(
            upload_status=data.get("uploadStatus"),
            failure_reason=data.get("failureReason"),
            rejection_reason=data.get("rejectionReason"),
            privacy_status=data.get("privacyStatus"),
            publish_at=(
                datetime.fromisoformat(publish_at.replace("Z", "+00:00"))
                if publish_at
                else None
            ),
            license=data.get("license"),
            embeddable=bool(data.get("embeddable", False)),
            public_stats_viewable=bool(data.get("publicStatsViewable", False)),
        )

    @property
    def is_deleted(self) -> bool:
        """Whether the video was deleted."""
        return self.upload_status == "deleted"

    @property
    def is_failed(self) -> bool:
        """Whether the video failed to upload."""
        return self.upload_status == "failed"

    @property
    def is_processed(self) -> bool:
        """Whether the video has been processed."""
        return self.upload_status == "processed"

    @property
    def is_rejected(self) -> bool:
        """Whether the video was rejected by YouTube."""
        return self.upload_status == "rejected"

    @property
    def is_uploaded(self) -> bool:
        """Whether the video was uploaded but not processed yet."""
        return self.upload_status == "uploaded"

    def _failed_because(self, reason: str) -> bool:
        return self.is_failed and self.failure_reason == reason

    def _rejected_because(self, reason: str) -> bool:
        return self.is_rejected and self.rejection_reason == reason

    @property
    def uses_unsupported_codec(self) -> bool:
        """Whether the upload failed because the video uses an unsupported
        codec.
        """
        return self._failed_because("codec")

    @property
    def has_failed_conversion(self) -> bool:
        """Whether the upload failed because the video could not be
        converted.
        """
        return self._failed_because("conversion")

    @property
    def is_empty(self) -> bool:
        """Whether the upload failed because the file is empty."""
        return self._failed_because("emptyFile")

    @property
    def is_invalid(self) -> bool:
        """Whether the upload failed because the file is invalid."""
        return self._failed_because("invalidFile")

    @property
    def is_too_small(self) -> bool:
        """Whether the upload failed because the file is too small."""
        return self._failed_because("tooSmall")

    @property
    def is_aborted(self) -> bool:
        """Whether the upload was aborted."""
        return self._failed_because("uploadAborted")

    @property
    def is_claimed(self) -> bool:
        """Whether the video was rejected because of a copyright claim."""
        return self._rejected_because("claim")

    @property
    def infringes_copyright(self) -> bool:
        """Whether the video was rejected for copyright infringement."""
        return self._rejected_because("copyright")

    @property
    def is_duplicate(self) -> bool:
        """Whether the video was rejected as a duplicate upload."""
        return self._rejected_because("duplicate")

    @property
    def is_inappropriate(self) -> bool:
        """Whether the video was rejected for inappropriate content."""
        return self._rejected_because("inappropriate")

    @property
    def is_too_long(self) -> bool:
        """Whether the video was rejected for being too long."""
        return self._rejected_because("length")

    @property
    def violates_terms_of_use(self) -> bool:
        """Whether the video was rejected for violating the terms of use."""
        return self._rejected_because("termsOfUse")

    @property
    def infringes_trademark(self) -> bool:
        """Whether the video was rejected for trademark infringement."""
        return self._rejected_because("trademark")

    @property
    def belongs_to_closed_account(self) -> bool:
        """Whether the video was rejected because the uploader's account was
        closed.
        """
        return self._rejected_because("uploaderAccountClosed")

    @property
    def belongs_to_suspended_account(self) -> bool:
        """Whether the video was rejected because the uploader's account was
        suspended.
        """
        return self._rejected_because("uploaderAccountSuspended")

    @property
    def is_public(self) -> bool:
        """Whether the video is public."""
        return self.privacy_status == "public"

    @property
    def is_private(self) -> bool:
        """Whether the video is private."""
        return self.privacy_status == "private"

    @property
    def is_unlisted(self) -> bool:
        """Whether the video is unlisted."""
        return self.privacy_status == "unlisted"

    @property
    def scheduled_at(self) -> datetime | None:
        """The time when the video is scheduled to be published, or None if
        the video is not scheduled.
        """
        return self.publish_at if self.is_private else None

    @property
    def is_scheduled(self) -> bool:
        """Whether the video is scheduled to be published."""
        return self.scheduled_at is not None

    @property
    def licensed_as_creative_commons(self) -> bool:
        """Whether the video uses the Creative Commons license."""
        return self.license == "creativeCommon"

    @property
    def licensed_as_standard_youtube(self) -> bool:
        """Whether the video uses the standard YouTube license."""
        return self.license == "youtube"

    @property
    def has_public_stats_viewable(self) -> bool:
        """Whether the extended statistics of the video are public."""
        return self.public_stats_viewable

    @property
    def is_embeddable(self) -> bool:
        """Whether the video can be embedded on another website."""
        return self.embeddable
