"""Download bookkeeping for one export run."""

from dataclasses import dataclass, field


@dataclass
class DownloadedFile:
    file_name: str
    file_path: str


@dataclass
class FailedDownload:
    file_name: str
    error: str


@dataclass
class DownloadResult:
    """Per-run success/failure report. Order follows the input asset order."""

    success: list[DownloadedFile] = field(default_factory=list)
    failed: list[FailedDownload] = field(default_factory=list)

    def mark_success(self, file_name: str, file_path: str) -> DownloadedFile:
        """Record a written file."""
        downloaded = DownloadedFile(file_name=file_name, file_path=file_path)
        self.success.append(downloaded)
        return downloaded

    def mark_failed(self, file_name: str, error: str) -> FailedDownload:
        """Record a failed asset."""
        failure = FailedDownload(file_name=file_name, error=error)
        self.failed.append(failure)
        return failure

    def get_stats(self) -> dict[str, int]:
        """Get counts by outcome."""
        return {"success": len(self.success), "failed": len(self.failed)}
