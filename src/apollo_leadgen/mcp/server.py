from apollo_leadgen import __version__


SERVER_NAME = 'apollo-lead-gen'


class McpDependencyNotInstalled(Exception):
    pass


def import_fast_mcp():
    try:
        from mcp.server.fastmcp import FastMCP
    except ModuleNotFoundError as module_not_found_error:
        raise McpDependencyNotInstalled(
            'apollo-lead-gen needs FastMCP from the mcp 1.x line '
            '(pip install "mcp>=1.2,<2"): %s' % module_not_found_error
        ) from module_not_found_error
    return FastMCP


def import_tool_registration():
    try:
        from apollo_leadgen.mcp.tools import register_tools
    except ModuleNotFoundError as module_not_found_error:
        if module_not_found_error.name == 'httpx':
            raise McpDependencyNotInstalled(
                'apollo-lead-gen requires httpx. '
                'Install project dependencies first.'
            ) from module_not_found_error
        raise
    return register_tools


def announce_version(mcp_server):
    low_level_server = getattr(mcp_server, '_mcp_server', None)
    if low_level_server is not None:
        low_level_server.version = __version__


def create_server(apollo_session):
    fast_mcp = import_fast_mcp()
    register_tools = import_tool_registration()
    mcp_server = fast_mcp(SERVER_NAME)
    announce_version(mcp_server)
    register_tools(mcp_server, apollo_session)
    return mcp_server
