"""
Publishing package: transfer of the rendered page to the web host.
"""

from .ftp_publisher import FtpPublisher

__all__ = ['FtpPublisher']
