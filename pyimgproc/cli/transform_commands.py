"""CLI commands applying pyimgproc transforms to image files."""

import sys

import click
import taichi as ti

from ..image import Image, load_image, save_image
from .. import pool, transforms

_ARCHS = ["cpu", "cuda", "gpu", "metal", "vulkan"]


def _init_taichi(arch):
    ti.init(arch=getattr(ti, arch), offline_cache=False)
    # fields from a previous runtime are invalid after ti.init
    pool.taichi_pool.clear()


arch_option = click.option(
    "--arch",
    type=click.Choice(_ARCHS),
    default="cpu",
    show_default=True,
    help="Taichi backend",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option("--xfac", "-x", default=2, show_default=True, type=click.IntRange(min=1),
              help="Horizontal reduction factor")
@click.option("--yfac", "-y", default=2, show_default=True, type=click.IntRange(min=1),
              help="Vertical reduction factor")
@arch_option
@verbose_option
def squash(input_image, output_image, xfac, yfac, arch, verbose):
    """Subsample INPUT_IMAGE by XFAC/YFAC and save to OUTPUT_IMAGE."""
    try:
        _init_taichi(arch)
        src = load_image(input_image)
        out_w, out_h = transforms.squashed_size(src.width, src.height, xfac, yfac)
        if verbose:
            click.echo(
                f"Squashing '{input_image}' ({src.width}x{src.height}) -> "
                f"{out_w}x{out_h} with xfac={xfac}, yfac={yfac}"
            )
        dst = Image(out_w, out_h)
        transforms.squash(src, dst, xfac, yfac)
        save_image(dst, output_image)
        if verbose:
            click.echo("Squash completed successfully!")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option("--times", "-n", default=1, show_default=True, type=click.IntRange(min=0),
              help="Number of rotations to apply")
@arch_option
@verbose_option
def rotate(input_image, output_image, times, arch, verbose):
    """Rotate the color channels of INPUT_IMAGE and save to OUTPUT_IMAGE."""
    try:
        _init_taichi(arch)
        src = load_image(input_image)
        if verbose:
            click.echo(f"Rotating channels of '{input_image}' {times} time(s)")
        # three rotations are the identity
        dst = src
        for _ in range(times % 3):
            nxt = Image.blank_like(dst)
            transforms.color_rotate(dst, nxt)
            dst = nxt
        save_image(dst, output_image)
        if verbose:
            click.echo("Rotation completed successfully!")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@click.option("--dist", "-d", default=1, show_default=True, type=click.IntRange(min=0),
              help="Blur window half-width in pixels")
@arch_option
@verbose_option
def blur(input_image, output_image, dist, arch, verbose):
    """Box blur INPUT_IMAGE and save to OUTPUT_IMAGE."""
    try:
        _init_taichi(arch)
        src = load_image(input_image)
        if verbose:
            click.echo(f"Blurring '{input_image}' with dist={dist}")
        dst = Image.blank_like(src)
        transforms.blur(src, dst, dist)
        save_image(dst, output_image)
        if verbose:
            click.echo("Blur completed successfully!")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True))
@click.argument("output_image", type=click.Path())
@arch_option
@verbose_option
def expand(input_image, output_image, arch, verbose):
    """Double the width and height of INPUT_IMAGE and save to OUTPUT_IMAGE."""
    try:
        _init_taichi(arch)
        src = load_image(input_image)
        if verbose:
            click.echo(
                f"Expanding '{input_image}' ({src.width}x{src.height}) -> "
                f"{2 * src.width}x{2 * src.height}"
            )
        dst = Image.blank_like(src, 2, 2)
        transforms.expand(src, dst)
        save_image(dst, output_image)
        if verbose:
            click.echo("Expand completed successfully!")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["squash", "rotate", "blur", "expand"]
