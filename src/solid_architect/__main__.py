"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

from solid_architect.domain.exceptions import ConfigurationError
from solid_architect.infrastructure.di.container import SolidContainer
from solid_architect.interface.cli import EXIT_ERROR, CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = SolidContainer()
    except ConfigurationError as e:
        print(f"solid-architect: configuration error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        declaration_source=container.get_declaration_source(),
        graph_builder=container.get_graph_builder(),
        rules=container.get_rules(),
        aggregator=container.get_report_aggregator(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
