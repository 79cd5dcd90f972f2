import logging

import httpx


APOLLO_API_BASE = 'https://api.apollo.io/v1'
DEFAULT_TIMEOUT_SECONDS = 30.0


class DomainException(Exception):
    pass


class ApolloApiError(DomainException):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def create_apollo_session(
    api_key,
    api_base_url=APOLLO_API_BASE,
    timeout=DEFAULT_TIMEOUT_SECONDS,
    transport=None,
):
    if not api_key or not api_key.strip():
        raise DomainException('An Apollo.io API key is required.')
    logging.getLogger(__name__).debug(
        'Opening Apollo.io session base_url=%s timeout=%s',
        api_base_url,
        timeout,
    )
    return httpx.Client(
        base_url=api_base_url,
        headers={
            'Content-Type': 'application/json',
            'X-Api-Key': api_key,
        },
        timeout=timeout,
        transport=transport,
    )


def close_session(apollo_session):
    apollo_session.close()


def post_json(apollo_session, path, payload):
    logging.getLogger(__name__).debug('POST %s', path)
    try:
        response = apollo_session.post(path, json=payload)
        response.raise_for_status()
    except httpx.HTTPStatusError as error:
        api_error = ApolloApiError(
            upstream_error_message(error),
            status_code=error.response.status_code,
        )
        log_failure(path, api_error)
        raise api_error from error
    except httpx.RequestError as error:
        api_error = ApolloApiError(client_error_message(error))
        log_failure(path, api_error)
        raise api_error from error
    try:
        return response.json()
    except ValueError as error:
        raise ApolloApiError(
            'Apollo.io returned a response that is not JSON.',
            status_code=response.status_code,
        ) from error


def upstream_error_message(error):
    try:
        response_data = error.response.json()
    except ValueError:
        response_data = None
    if isinstance(response_data, dict) and response_data.get('message'):
        return str(response_data['message'])
    return client_error_message(error)


def client_error_message(error):
    return str(error) or error.__class__.__name__


def log_failure(path, api_error):
    logging.getLogger(__name__).warning(
        'POST %s failed: %s',
        path,
        apollo_error_payload(api_error),
    )


def apollo_error_payload(error):
    return {
        'message': error.message,
        'status_code': error.status_code,
    }
