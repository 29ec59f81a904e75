"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from posetransfer.models.pose import PoseGraph

app = typer.Typer(
    name="posetransfer",
    help="Re-pose a subject photo with a generative image model.",
    no_args_is_help=False,
)


def _load_pose(preset: str | None, pose_file: Path | None) -> PoseGraph:
    """Resolve --preset / --pose-file into a PoseGraph (default pose if neither)."""
    from posetransfer.models.pose import PoseGraph
    from posetransfer.poses import PresetNotFoundError, load

    if preset and pose_file:
        typer.echo("Error: use either --preset or --pose-file, not both.", err=True)
        raise typer.Exit(1)
    if preset:
        try:
            return load(preset).to_graph()
        except PresetNotFoundError as e:
            typer.echo(f"Error: {e.args[0]}", err=True)
            raise typer.Exit(1) from None
    if pose_file:
        from pydantic import ValidationError

        try:
            return PoseGraph.model_validate_json(pose_file.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            typer.echo(f"Error: cannot read pose file {pose_file}: {e}", err=True)
            raise typer.Exit(1) from None
    return PoseGraph()


@app.command()
def presets(
    icons: Annotated[
        Path | None, typer.Option("--icons", help="Also write a PNG thumbnail per preset here"),
    ] = None,
    size: Annotated[int, typer.Option("--icon-size", min=16, help="Thumbnail size in pixels")] = 64,
) -> None:
    """List the built-in preset poses."""
    from posetransfer.pipeline.render import render_icon
    from posetransfer.poses import all_presets

    if icons is not None:
        icons.mkdir(parents=True, exist_ok=True)
    for preset in all_presets():
        typer.echo(preset.name)
        if icons is not None:
            slug = preset.name.lower().replace(" ", "-")
            render_icon(preset.to_graph(), size).save(icons / f"{slug}.png")


@app.command("export-pose")
def export_pose(
    output: Annotated[Path, typer.Argument(help="Output PNG path")] = Path("pose.png"),
    preset: Annotated[
        str | None, typer.Option("--preset", "-p", help="Built-in preset name"),
    ] = None,
    pose_file: Annotated[
        Path | None, typer.Option("--pose-file", "-f", help="Pose JSON file"),
    ] = None,
) -> None:
    """Render a pose as a stick-figure PNG pose cue."""
    from posetransfer.pipeline.export import save_pose_image

    graph = _load_pose(preset, pose_file)
    save_pose_image(graph, output)
    typer.echo(f"Saved pose cue: {output}")


@app.command()
def generate(
    photo: Annotated[Path, typer.Argument(help="Subject photo (PNG, JPEG or WEBP)")],
    preset: Annotated[
        str | None, typer.Option("--preset", "-p", help="Built-in preset name"),
    ] = None,
    pose_file: Annotated[
        Path | None, typer.Option("--pose-file", "-f", help="Pose JSON file"),
    ] = None,
    pose_image: Annotated[
        Path | None,
        typer.Option("--pose-image", "-i", help="Ready-made pose cue image (e.g. a drawing)"),
    ] = None,
    size: Annotated[
        str | None, typer.Option("--size", "-s", help="Output size, e.g. 512x768"),
    ] = None,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Where to write the result"),
    ] = Path("ai-pose-transfer.png"),
    backend: Annotated[
        str | None,
        typer.Option("--backend", "-b", help="Backend: gemini, proxy, or mock"),
    ] = None,
) -> None:
    """Re-render PHOTO in the chosen pose."""
    import asyncio

    from posetransfer.backend import GenerationError, create_backend
    from posetransfer.config import load_config
    from posetransfer.models.sizes import get_size
    from posetransfer.models.upload import ImageLoadError, UploadedImage
    from posetransfer.pipeline.export import export_data_url
    from posetransfer.pipeline.transfer import NoPoseError, PoseTransferSession, save_result

    config = load_config()
    backend_name = backend or config.active_backend

    try:
        subject = UploadedImage.from_path(photo)
        dimensions = get_size(size) if size else None
        gen_backend = create_backend(backend_name, config)
    except (ImageLoadError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if pose_image is not None:
        if preset or pose_file:
            typer.echo("Error: --pose-image cannot be combined with --preset/--pose-file.", err=True)
            raise typer.Exit(1)
        try:
            pose_data_url = UploadedImage.from_path(pose_image).data_url
        except ImageLoadError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None
    else:
        pose_data_url = export_data_url(_load_pose(preset, pose_file))

    async def _run() -> None:
        await gen_backend.connect()
        try:
            typer.echo(f"Generating ({backend_name}): {photo.name}")
            session = PoseTransferSession(gen_backend)
            result = await session.generate(
                subject,
                pose_data_url,
                dimensions,
                progress_callback=lambda step, total, status: typer.echo(
                    f"  {status} ({step}/{total})"
                ),
            )
            save_result(result, output)
            typer.echo(f"Saved: {output}")
        finally:
            await gen_backend.disconnect()

    try:
        asyncio.run(_run())
    except (NoPoseError, GenerationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.command()
def check(
    backend: Annotated[
        str | None,
        typer.Option("--backend", "-b", help="Backend: gemini, proxy, or mock"),
    ] = None,
) -> None:
    """Check backend connectivity and report status."""
    import asyncio

    from posetransfer.backend import create_backend
    from posetransfer.config import load_config

    config = load_config()
    backend_name = backend or config.active_backend
    try:
        gen_backend = create_backend(backend_name, config)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    async def _run() -> None:
        await gen_backend.connect()
        try:
            available = await gen_backend.is_available()
            if available:
                models = await gen_backend.get_models()
                typer.echo(f"{backend_name}: connected")
                typer.echo(f"Models: {', '.join(models)}")
                typer.echo("Status: ready")
            else:
                typer.echo(f"{backend_name}: unavailable")
                typer.echo("Status: offline")
                raise typer.Exit(1)
        finally:
            await gen_backend.disconnect()

    asyncio.run(_run())


@app.command()
def edit() -> None:
    """Launch the interactive pose editor TUI."""
    from posetransfer.app import run

    run()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """PoseTransfer - re-pose a subject photo from a stick-figure pose cue."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if version:
        from posetransfer import __version__

        typer.echo(f"posetransfer {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
