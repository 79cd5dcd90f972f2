from apollo_leadgen.apollo.session import DomainException
from apollo_leadgen.apollo.session import post_json


endpoint_paths_by_tool_name = {
    'organization_search': '/mixed_companies/search',
    'people_search': '/mixed_people/search',
    'people_enrichment': '/people/match',
    'organization_enrichment': '/organizations/enrich',
}


def tool_names():
    return list(endpoint_paths_by_tool_name)


def request_body(arguments):
    return {
        field_name: value
        for field_name, value in arguments.items()
        if value is not None
    }


def call_endpoint(apollo_session, tool_name, arguments):
    if tool_name not in endpoint_paths_by_tool_name:
        raise DomainException('Unknown tool: %s' % tool_name)
    return post_json(
        apollo_session,
        endpoint_paths_by_tool_name[tool_name],
        request_body(arguments),
    )


def organization_search(apollo_session, **search_fields):
    return call_endpoint(apollo_session, 'organization_search', search_fields)


def people_search(apollo_session, **search_fields):
    return call_endpoint(apollo_session, 'people_search', search_fields)


def people_enrichment(apollo_session, **match_fields):
    return call_endpoint(apollo_session, 'people_enrichment', match_fields)


def organization_enrichment(apollo_session, **match_fields):
    return call_endpoint(apollo_session, 'organization_enrichment', match_fields)
