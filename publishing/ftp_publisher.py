"""
FTP publisher for the rendered pairings page.
"""

import ftplib
import logging
import posixpath

from models.tournament import PublishConfig
from models.exceptions import PublishError

logger = logging.getLogger(__name__)


class FtpPublisher:
    """Uploads a local file to the configured FTP destination."""

    def __init__(self, config: PublishConfig, ftp_factory=ftplib.FTP):
        self.config = config
        self.ftp_factory = ftp_factory

    def remote_path(self, remote_name: str) -> str:
        if not self.config.destination_dir:
            return remote_name
        return posixpath.join(self.config.destination_dir, remote_name)

    def publish(self, local_file: str, remote_name: str = None) -> str:
        """
        Upload `local_file` as `remote_name` and return the remote path.

        Raises PublishError on any transfer failure. No retry is attempted.
        """
        if not self.config.host:
            raise PublishError("No FTP host configured")

        remote_path = self.remote_path(remote_name or self.config.remote_name)
        ftp = None
        try:
            ftp = self.ftp_factory()
            ftp.connect(self.config.host, self.config.port, timeout=self.config.timeout)
            ftp.login(self.config.user, self.config.password)
            with open(local_file, 'rb') as f:
                ftp.storbinary(f"STOR {remote_path}", f)
        except ftplib.all_errors as e:
            if ftp is not None:
                ftp.close()
            raise PublishError(f"Upload of {local_file} to {self.config.host}:{remote_path} failed: {e}") from e

        # Upload is complete here; a failed QUIT is not a publish failure
        try:
            ftp.quit()
        except ftplib.all_errors as e:
            logger.warning(f"FTP QUIT failed after upload to {self.config.host}: {e}")
            ftp.close()

        logger.info(f"Published {local_file} to {self.config.host}:{remote_path}")
        return remote_path
