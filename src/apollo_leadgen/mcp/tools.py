import functools
import logging
import time
from typing import Annotated
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from apollo_leadgen.apollo import DomainException
from apollo_leadgen.apollo import call_endpoint


KeywordTags = Annotated[
    Optional[List[str]],
    Field(description='Keywords to search for (e.g., ["hvac", "heating", "cooling"])'),
]
OrganizationLocations = Annotated[
    Optional[List[str]],
    Field(description='Locations to filter by (e.g., ["North Carolina", "Atlanta, GA"])'),
]
Page = Annotated[
    Optional[Union[int, float]],
    Field(description='Page number for pagination (default: 1)'),
]
PerPage = Annotated[
    Optional[Union[int, float]],
    Field(description='Results per page (default: 25, max: 100)'),
]


def register_tools(mcp_server, apollo_session):
    original_tool_decorator_factory = mcp_server.tool

    def logged_tool_decorator_factory(*decorator_arguments, **decorator_keywords):
        tool_decorator = original_tool_decorator_factory(
            *decorator_arguments,
            **decorator_keywords,
        )

        def logged_tool_decorator(function):
            @functools.wraps(function)
            def logged_tool(*function_arguments, **function_keywords):
                logger = logging.getLogger(__name__)
                logger.debug('Calling tool %s', function.__name__)
                started_at = time.monotonic()
                try:
                    tool_result = function(*function_arguments, **function_keywords)
                except Exception as error:
                    logger.warning(
                        'Tool %s failed after %.3fs: %s',
                        function.__name__,
                        time.monotonic() - started_at,
                        error,
                    )
                    raise
                logger.info(
                    'Tool %s completed in %.3fs',
                    function.__name__,
                    time.monotonic() - started_at,
                )
                return tool_result

            return tool_decorator(logged_tool)

        return logged_tool_decorator

    def forward(tool_name, arguments):
        try:
            return call_endpoint(apollo_session, tool_name, arguments)
        except DomainException as error:
            raise ToolError(str(error)) from error

    @logged_tool_decorator_factory()
    def organization_search(
        q_organization_keyword_tags: KeywordTags = None,
        organization_locations: OrganizationLocations = None,
        organization_num_employees_ranges: Annotated[
            Optional[List[str]],
            Field(description='Employee count ranges (e.g., ["10,50", "50,100"])'),
        ] = None,
        revenue_range: Annotated[
            Optional[Dict[str, float]],
            Field(description='Revenue bounds, with optional "min" and "max" keys'),
        ] = None,
        page: Page = None,
        per_page: PerPage = None,
    ):
        """Search for companies/organizations in Apollo.io database. Use keywords like "hvac", "heating", "cooling" to find HVAC businesses. Filter by location, employee count, and revenue."""
        return forward(
            'organization_search',
            {
                'q_organization_keyword_tags': q_organization_keyword_tags,
                'organization_locations': organization_locations,
                'organization_num_employees_ranges': organization_num_employees_ranges,
                'revenue_range': revenue_range,
                'page': page,
                'per_page': per_page,
            },
        )

    @logged_tool_decorator_factory()
    def people_search(
        q_keywords: Annotated[
            Optional[str],
            Field(description='Keywords to search in person profiles'),
        ] = None,
        person_titles: Annotated[
            Optional[List[str]],
            Field(description='Job titles to search for (e.g., ["owner", "ceo", "president"])'),
        ] = None,
        person_seniorities: Annotated[
            Optional[List[str]],
            Field(description='Seniority levels (e.g., ["owner", "founder", "c_suite", "vp"])'),
        ] = None,
        q_organization_keyword_tags: Annotated[
            Optional[List[str]],
            Field(description='Company keywords (e.g., ["hvac", "heating"])'),
        ] = None,
        organization_locations: Annotated[
            Optional[List[str]],
            Field(description='Company locations'),
        ] = None,
        contact_email_status: Annotated[
            Optional[List[str]],
            Field(description='Email status filter (e.g., ["verified", "likely_to_engage"])'),
        ] = None,
        page: Page = None,
        per_page: PerPage = None,
    ):
        """Search for people/contacts in Apollo.io database. Find decision makers by job title, seniority level, and company criteria."""
        return forward(
            'people_search',
            {
                'q_keywords': q_keywords,
                'person_titles': person_titles,
                'person_seniorities': person_seniorities,
                'q_organization_keyword_tags': q_organization_keyword_tags,
                'organization_locations': organization_locations,
                'contact_email_status': contact_email_status,
                'page': page,
                'per_page': per_page,
            },
        )

    @logged_tool_decorator_factory()
    def people_enrichment(
        email: Annotated[
            Optional[str],
            Field(description='Email address of the person'),
        ] = None,
        id: Annotated[
            Optional[str],
            Field(description='Apollo.io person ID'),
        ] = None,
    ):
        """Get detailed information about a specific person using their email or Apollo.io ID."""
        return forward('people_enrichment', {'email': email, 'id': id})

    @logged_tool_decorator_factory()
    def organization_enrichment(
        domain: Annotated[
            Optional[str],
            Field(description='Company domain (e.g., "acmehvac.com")'),
        ] = None,
        id: Annotated[
            Optional[str],
            Field(description='Apollo.io organization ID'),
        ] = None,
    ):
        """Get detailed information about a specific organization using their domain or Apollo.io ID."""
        return forward('organization_enrichment', {'domain': domain, 'id': id})

    return mcp_server
