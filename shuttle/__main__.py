"""Entry point for shuttle package."""

import argparse
from typing import Optional

from rich.console import Console
from rich.table import Table


def _player_table(context) -> Table:
    table = Table(title="Players")
    table.add_column("ID", style="bold")
    table.add_column("Team")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Reach", justify="right")

    for player in context.get_players():
        table.add_row(
            player.label,
            player.side.value,
            f"{player.x:.1f}",
            f"{player.y:.1f}",
            f"{player.radius:.1f}",
            style=player.color,
        )
    return table


def run_demo(move: Optional[list[str]], auto_rotation: bool, frame_ms: int) -> None:
    """Move one player, let the partner rotate and report the weakest spot."""
    from shuttle.simulation import CourtContext

    console = Console()
    context = CourtContext(auto_rotation=auto_rotation)

    if move:
        player_id, x, y = move[0], float(move[1]), float(move[2])
        player = context.set_player_position(player_id, x, y)
        console.print(f"Moved [bold]{player.id}[/bold] to ({player.x:.1f}, {player.y:.1f})")

        plan = context.on_drag_end(player_id)
        if plan is not None:
            console.print(
                f"Tactical state: [bold]{plan.state.value}[/bold], "
                f"partner target ({plan.target.x:.1f}, {plan.target.y:.1f})"
            )
            frames = 0
            while context.advance(frame_ms):
                frames += 1
            console.print(f"Rotation finished after {frames + 1} frames")

    console.print(_player_table(context))

    field = context.render_field()
    if field.furthest_point is None:
        console.print("No weakest point (team has no defenders)")
    else:
        point = field.furthest_point
        console.print(f"Weakest point: ({point.x:.1f}, {point.y:.1f})")
    console.print(f"Half-court inside reach: {field.coverage_fraction():.1%}")
    console.print(f"Exposed cells drawn: {len(field.cells())}")


def main() -> None:
    """Main entry point for the Shuttle application."""
    parser = argparse.ArgumentParser(
        description="Shuttle - doubles badminton coverage and auto-rotation",
        prog="shuttle",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the API server instead of the demo",
    )
    parser.add_argument("--host", type=str, default=None, help="API host (default: config)")
    parser.add_argument("--port", type=int, default=None, help="API port (default: config)")
    parser.add_argument(
        "--move",
        nargs=3,
        metavar=("ID", "X", "Y"),
        help="Drag a player to (X, Y) and release it, e.g. --move A1 150 1250",
    )
    parser.add_argument(
        "--no-rotation",
        action="store_true",
        help="Disable auto-rotation for the demo",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: SHUTTLE_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()

    from shuttle.config import configure_logging, get_config

    configure_logging(args.log_level)

    if args.serve:
        from shuttle.api.main import run_api

        run_api(host=args.host, port=args.port)
    else:
        run_demo(args.move, auto_rotation=not args.no_rotation, frame_ms=get_config().frame_ms)


if __name__ == "__main__":
    main()
