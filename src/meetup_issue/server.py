"""FastMCP server entrypoint.

Registers the meetup tools. The tool implementations live in
`meetup_issue.tools` so they can be unit-tested without the runtime.

Note: We import FastMCP lazily so the core package only needs
pydantic until the MCP runtime is actually used.
"""

from __future__ import annotations

import logging

from .config import AppConfig, load_config
from .schemas import (
    MeetupResultOutput,
    ParseMeetupIssueInput,
    RenderMeetupIssueInput,
    RenderMeetupIssueOutput,
    RenderPullRequestInput,
    RenderPullRequestOutput,
    ValidateMeetupFormInput,
)
from .tools import (
    parse_meetup_issue,
    render_meetup_issue,
    render_meetup_pull_request,
    validate_meetup_form,
)

logger = logging.getLogger(__name__)


def _register_fastmcp_tools(app, config: AppConfig) -> None:
    # Namespace: meetup.*

    @app.tool("meetup.form.validate")
    def form_validate(params: ValidateMeetupFormInput) -> MeetupResultOutput:
        return validate_meetup_form(config, params)

    @app.tool("meetup.issue.render")
    def issue_render(params: RenderMeetupIssueInput) -> RenderMeetupIssueOutput:
        return render_meetup_issue(config, params)

    @app.tool("meetup.issue.parse")
    def issue_parse(params: ParseMeetupIssueInput) -> MeetupResultOutput:
        return parse_meetup_issue(config, params)

    @app.tool("meetup.pull_request.render")
    def pull_request_render(params: RenderPullRequestInput) -> RenderPullRequestOutput:
        return render_meetup_pull_request(config, params)


def main() -> None:
    """Run the FastMCP application.

    This function loads configuration, configures logging and registers
    all tools with the FastMCP runtime. It is safe to import and call
    `main()` from other entrypoints.
    """

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        from fastmcp import FastMCP
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "fastmcp is not installed. Install with 'pip install meetup-issue[mcp]'"
        ) from exc

    app = FastMCP(config.server_name)
    _register_fastmcp_tools(app, config)
    logger.info("Starting %s (timezone=%s)", config.server_name, config.timezone)

    # Run the FastMCP app (serves until interrupted)
    app.run()


if __name__ == "__main__":  # pragma: no cover
    main()
