"""Mini README: Rebuild a tour folder from a remote tour.

``TourDownloader`` writes the layout the bulk uploader reads, so a downloaded
tour can be edited and uploaded again.
"""

from .downloader import DownloadResult, TourDownloader, claim_filename, extension_from_url, media_filename

__all__ = ["DownloadResult", "TourDownloader", "claim_filename", "extension_from_url", "media_filename"]
