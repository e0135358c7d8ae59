"""
Main application: renders the current round's pairings and publishes them.
"""

import logging
import sys
from typing import Any, Dict, Optional

from config.config_manager import ConfigManager
from models.exceptions import (
    PairingsError,
    SourceUnavailableError,
    StructuralIncompletenessError,
)
from pairings.pairing_processor import PairingProcessor
from parsing.tournament_parser import TournamentParser, MIN_CONTENT_LENGTH
from publishing.ftp_publisher import FtpPublisher
from reports.page_renderer import PageRenderer

logger = logging.getLogger(__name__)


class PairingsPublisher:
    """Runs the read, render and publish pipeline once."""

    def __init__(self, config: Dict[str, Any], publisher: Optional[FtpPublisher] = None):
        self.config = config
        self.source_file = config.get('source_file', 'tournament.xml')
        self.output_file = config.get('output_file', 'output.html')
        self.parser = TournamentParser(int(config.get('min_content_length', MIN_CONTENT_LENGTH)))
        self.publish_config = ConfigManager.get_publish_config(config)
        self.publish_enabled = ConfigManager.is_publish_enabled(config)
        self.publisher = publisher or FtpPublisher(self.publish_config)

    def build_page(self) -> str:
        """
        Render the page for the current state of the export.

        Missing or incomplete data yields the waiting page. Other errors,
        such as an unreadable source file, propagate.
        """
        try:
            tournament = self.parser.load(self.source_file)
        except SourceUnavailableError as e:
            logger.warning(f"No tournament data, rendering waiting page: {e}")
            return PageRenderer.render_waiting()
        except StructuralIncompletenessError as e:
            logger.warning(f"Incomplete tournament data, rendering waiting page: {e}")
            return PageRenderer.render_waiting()

        logger.info(f"Loaded tournament '{tournament.name}' with {len(tournament.players)} players "
                    f"and {len(tournament.rounds)} rounds")
        rows = PairingProcessor(tournament).build_rows()
        return PageRenderer.render_standings(tournament.name, rows)

    def run(self) -> Optional[str]:
        """Build, write and publish the page. Returns the remote path, or None when publishing is disabled."""
        html = self.build_page()
        PageRenderer.write_page(html, self.output_file)

        if not self.publish_enabled:
            logger.info("Publishing disabled, page written locally only")
            return None
        return self.publisher.publish(self.output_file, self.publish_config.remote_name)


def main(config_file: Optional[str] = None) -> int:
    """Main application entry point. The config file defaults to the first argument or config.yaml."""
    if config_file is None:
        config_file = sys.argv[1] if len(sys.argv) > 1 else "config.yaml"
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        logger.info("Starting pairings publisher...")
        config = ConfigManager.apply_environment(ConfigManager.load_config(config_file))
        remote_path = PairingsPublisher(config).run()
        if remote_path:
            logger.info(f"Pairings page published as {remote_path}")
        logger.info("Pairings publisher completed successfully")
        return 0
    except PairingsError as e:
        logger.error(f"Error in pairings publisher: {e}")
        return 1
    except OSError as e:
        logger.exception(f"I/O error in pairings publisher: {e}")
        return 1
    except ValueError as e:
        # Undecodable source file or a non-numeric setting such as FTP_PORT
        logger.exception(f"Invalid data in pairings publisher: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
