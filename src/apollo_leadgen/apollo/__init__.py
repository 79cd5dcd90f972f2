from apollo_leadgen.apollo.endpoints import call_endpoint
from apollo_leadgen.apollo.endpoints import endpoint_paths_by_tool_name
from apollo_leadgen.apollo.endpoints import organization_enrichment
from apollo_leadgen.apollo.endpoints import organization_search
from apollo_leadgen.apollo.endpoints import people_enrichment
from apollo_leadgen.apollo.endpoints import people_search
from apollo_leadgen.apollo.endpoints import request_body
from apollo_leadgen.apollo.endpoints import tool_names
from apollo_leadgen.apollo.session import APOLLO_API_BASE
from apollo_leadgen.apollo.session import ApolloApiError
from apollo_leadgen.apollo.session import DEFAULT_TIMEOUT_SECONDS
from apollo_leadgen.apollo.session import DomainException
from apollo_leadgen.apollo.session import apollo_error_payload
from apollo_leadgen.apollo.session import close_session
from apollo_leadgen.apollo.session import create_apollo_session
from apollo_leadgen.apollo.session import post_json

__all__ = [
    'APOLLO_API_BASE',
    'ApolloApiError',
    'DEFAULT_TIMEOUT_SECONDS',
    'DomainException',
    'apollo_error_payload',
    'call_endpoint',
    'close_session',
    'create_apollo_session',
    'endpoint_paths_by_tool_name',
    'organization_enrichment',
    'organization_search',
    'people_enrichment',
    'people_search',
    'post_json',
    'request_body',
    'tool_names',
]
