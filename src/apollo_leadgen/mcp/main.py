import argparse
import logging
import os
import sys

from apollo_leadgen.apollo.session import APOLLO_API_BASE
from apollo_leadgen.apollo.session import DEFAULT_TIMEOUT_SECONDS
from apollo_leadgen.apollo.session import close_session
from apollo_leadgen.apollo.session import create_apollo_session
from apollo_leadgen.mcp.server import create_server


def configure_logging(log_level):
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def run_application():
    parser = argparse.ArgumentParser(
        description='Run the Apollo.io lead generation MCP server.'
    )
    parser.add_argument(
        '--transport',
        default='stdio',
        choices=['stdio'],
        help='MCP transport type.',
    )
    parser.add_argument(
        '--api-key',
        default=os.environ.get('APOLLO_API_KEY', ''),
        help='Apollo.io API key (defaults to $APOLLO_API_KEY).',
    )
    parser.add_argument(
        '--api-base-url',
        default=os.environ.get('APOLLO_API_BASE', APOLLO_API_BASE),
        help='Apollo.io API base URL (defaults to $APOLLO_API_BASE).',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=os.environ.get(
            'APOLLO_TIMEOUT_SECONDS',
            str(DEFAULT_TIMEOUT_SECONDS),
        ),
        help='Upstream request timeout in seconds.',
    )
    parser.add_argument(
        '--log-level',
        default=os.environ.get('APOLLO_LOG_LEVEL', 'INFO').upper(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level; logs are written to stderr.',
    )
    arguments = parser.parse_args()
    if not arguments.api_key.strip():
        parser.exit(
            1,
            'Error: APOLLO_API_KEY environment variable is required\n',
        )
    configure_logging(arguments.log_level)
    logger = logging.getLogger(__name__)
    apollo_session = create_apollo_session(
        arguments.api_key,
        api_base_url=arguments.api_base_url,
        timeout=arguments.timeout,
    )
    try:
        mcp_server = create_server(apollo_session=apollo_session)
        logger.info('Apollo.io MCP server running on %s', arguments.transport)
        mcp_server.run(transport=arguments.transport)
    except Exception:
        logger.exception('Fatal error')
        sys.exit(1)
    finally:
        close_session(apollo_session)


if __name__ == '__main__':
    run_application()
