import json

import httpx

from reahl.tofu import Fixture
from reahl.tofu import expected
from reahl.tofu import scenario
from reahl.tofu import tear_down
from reahl.tofu import with_fixtures

from apollo_leadgen.apollo import DomainException
from apollo_leadgen.apollo import call_endpoint
from apollo_leadgen.apollo import close_session
from apollo_leadgen.apollo import create_apollo_session
from apollo_leadgen.apollo import organization_enrichment
from apollo_leadgen.apollo import organization_search
from apollo_leadgen.apollo import people_enrichment
from apollo_leadgen.apollo import people_search
from apollo_leadgen.apollo import request_body
from apollo_leadgen.apollo import tool_names


class EndpointFixture(Fixture):
    def new_recorded_requests(self):
        return []

    def handle_request(self, request):
        self.recorded_requests.append(request)
        return httpx.Response(200, json={'echo_path': request.url.path})

    def new_apollo_session(self):
        return create_apollo_session(
            'test-api-key',
            transport=httpx.MockTransport(self.handle_request),
        )

    @tear_down
    def close_apollo_session(self):
        close_session(self.apollo_session)

    @scenario
    def organization_search_call(self):
        self.endpoint_function = organization_search
        self.fields = {'q_organization_keyword_tags': ['hvac'], 'per_page': 10}
        self.expected_path = '/v1/mixed_companies/search'

    @scenario
    def people_search_call(self):
        self.endpoint_function = people_search
        self.fields = {'person_seniorities': ['owner', 'c_suite']}
        self.expected_path = '/v1/mixed_people/search'

    @scenario
    def people_enrichment_call(self):
        self.endpoint_function = people_enrichment
        self.fields = {'email': 'pat@acmehvac.com'}
        self.expected_path = '/v1/people/match'

    @scenario
    def organization_enrichment_call(self):
        self.endpoint_function = organization_enrichment
        self.fields = {'domain': 'acmehvac.com'}
        self.expected_path = '/v1/organizations/enrich'


@with_fixtures(EndpointFixture)
def test_each_operation_posts_its_fields_to_its_endpoint(endpoint_fixture):
    response_data = endpoint_fixture.endpoint_function(
        endpoint_fixture.apollo_session,
        **endpoint_fixture.fields,
    )

    assert response_data == {'echo_path': endpoint_fixture.expected_path}
    [request] = endpoint_fixture.recorded_requests
    assert request.method == 'POST'
    assert request.url.path == endpoint_fixture.expected_path
    assert json.loads(request.content) == endpoint_fixture.fields


def test_request_body_omits_fields_that_were_not_supplied():
    assert request_body(
        {
            'q_keywords': 'heating',
            'person_titles': None,
            'page': 1,
            'organization_locations': [],
        }
    ) == {
        'q_keywords': 'heating',
        'page': 1,
        'organization_locations': [],
    }


def test_request_body_passes_nested_values_through_unchanged():
    revenue_range = {'min': 1000000, 'max': 5000000}
    assert request_body({'revenue_range': revenue_range}) == {
        'revenue_range': revenue_range,
    }


@with_fixtures(EndpointFixture)
def test_call_endpoint_rejects_unknown_tool_names(endpoint_fixture):
    with expected(DomainException):
        call_endpoint(endpoint_fixture.apollo_session, 'contact_delete', {})
    assert endpoint_fixture.recorded_requests == []


def test_dispatch_table_lists_the_four_tools():
    assert tool_names() == [
        'organization_search',
        'people_search',
        'people_enrichment',
        'organization_enrichment',
    ]
