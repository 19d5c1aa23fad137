import click
from book_builder.config.settings import PROFILES, get_profile
from book_builder.config.sizes import DEFAULT_CATALOG
from book_builder.cover.spine import Binding
from book_builder.errors import BookBuilderError
from book_builder.formats.resolver import FormatResolver, validate_custom_dimensions
from book_builder.logging_config import configure_logging
from book_builder.models.template import BookFormat
from book_builder.renderer.guides import Rect, compute_guides, fit_scale
from book_builder.templates.builder import assemble_template
from book_builder.templates.io import load_template, save_template


def _format_summary(fmt: BookFormat) -> str:
    parts = [
        f"Format: {fmt.name} ({fmt.id})",
        f"Trim: {fmt.no_bleed.width:.3f} x {fmt.no_bleed.height:.3f} in",
        f"With bleed: {fmt.with_bleed.width:.3f} x {fmt.with_bleed.height:.3f} in",
    ]
    if fmt.page_count is not None:
        parts.append(f"Pages: {fmt.page_count}")
    if fmt.is_spread and fmt.spine_width:
        parts.append(f'Spine: {fmt.spine_width:.3f}"')
    if fmt.gutter_width > 0:
        parts.append(f'Gutter: {fmt.gutter_width:.3f}"')
    return " | ".join(parts)


def _rect_line(label: str, r: Rect) -> str:
    return f"  {label:<7} left={r.left:.2f} top={r.top:.2f} width={r.width:.2f} height={r.height:.2f}"


def _parse_viewport(value: str) -> tuple[float, float]:
    try:
        width, height = (float(v) for v in value.lower().split("x"))
    except ValueError:
        raise click.BadParameter(f"expected WxH, got '{value}'", param_hint="--viewport")
    if width <= 0 or height <= 0:
        raise click.BadParameter("viewport sides must be positive", param_hint="--viewport")
    return width, height


@click.command(help="Resolve book formats, print guide geometry and export template JSON for the book template editor.")
@click.option("--list-formats", "list_formats", is_flag=True, default=False, help="List catalog formats and exit")
@click.option("--format", "format_id", type=str, default="usTrade", show_default=True, help="Catalog format id, e.g. digest or digestSpread")
@click.option("--pages", type=click.IntRange(min=0), default=None, help="Interior page count (defaults to the profile's)")
@click.option("--binding", type=click.Choice([b.value for b in Binding], case_sensitive=False), default=None, help="Binding used for spine width (defaults to the profile's)")
@click.option("--spread/--no-spread", "spread", default=None, help="Switch to the cover spread (or back to the single page)")
@click.option("--custom-width", "custom_width", type=float, default=None, help="Custom trim width in inches (requires --custom-height)")
@click.option("--custom-height", "custom_height", type=float, default=None, help="Custom trim height in inches (requires --custom-width)")
@click.option("--profile", "profile_name", type=click.Choice(list(PROFILES.keys())), default=None, help="Editor profile (screen: 72 dpi, print: 300 dpi)")
@click.option("--dpi", type=float, default=None, help="Device units per inch for guide geometry (overrides the profile)")
@click.option("--guides", "show_guides", is_flag=True, default=False, help="Print trim, safety, gutter and spine regions")
@click.option("--viewport", type=str, default=None, help="Viewport size WxH in device units; prints the zoom that fits the bled page")
@click.option("--name", "template_name", type=str, default=None, help="Template name (defaults to the profile's)")
@click.option("--out", "out_path", type=str, default=None, help="Write an empty template JSON for the resolved format")
@click.option("--validate-path", "validate_path", type=str, default=None, help="Import a template JSON, report its format and exit")
@click.option("--verbose", is_flag=True, default=False, help="Debug logging")
def main(list_formats: bool, format_id: str, pages: int | None, binding: str | None, spread: bool | None,
         custom_width: float | None, custom_height: float | None, profile_name: str | None, dpi: float | None,
         show_guides: bool, viewport: str | None, template_name: str | None, out_path: str | None, validate_path: str | None, verbose: bool):
    configure_logging("DEBUG" if verbose else None)
    profile = get_profile(profile_name)

    if list_formats:
        for fmt in DEFAULT_CATALOG.formats():
            kind = "spread" if fmt.is_spread else "page"
            click.echo(f"{fmt.id:<18} {fmt.name:<18} {fmt.no_bleed.width:g} x {fmt.no_bleed.height:g} in ({kind})")
        return

    # Validation mode
    if validate_path:
        try:
            template = load_template(validate_path)
        except (OSError, BookBuilderError) as e:
            click.echo(f"❌ {e}")
            raise SystemExit(1)
        click.echo(f"✅ Template '{template.name}' ({template.id}) with {len(template.elements)} element(s)")
        click.echo(_format_summary(template.format))
        return

    page_count = pages if pages is not None else profile.page_count
    bind = Binding((binding or profile.binding).lower())
    resolver = FormatResolver(DEFAULT_CATALOG)

    try:
        if custom_width is not None or custom_height is not None:
            if custom_width is None or custom_height is None:
                raise click.UsageError("--custom-width and --custom-height must be given together")
            validate_custom_dimensions(custom_width, custom_height, profile.min_custom_in, profile.max_custom_in)
            fmt = resolver.custom(custom_width, custom_height, bool(spread), page_count, bind)
        else:
            fmt = resolver.from_catalog(format_id, page_count, bind)
            if spread is not None:
                result = resolver.toggle_spread(fmt, spread, page_count, bind)
                if result.reason is not None:
                    click.echo(f"⚠️  {result.reason}; keeping {fmt.id}")
                fmt = result.format
    except BookBuilderError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)

    click.echo(_format_summary(fmt))

    if show_guides:
        layout = compute_guides(
            fmt,
            scale=dpi or profile.dpi,
            show_gutter=profile.show_gutter,
            show_bleed=profile.show_bleed,
            show_safety=profile.show_safety,
        )
        click.echo(f"Guides at {layout.scale:g} units/in:")
        click.echo(_rect_line("page", layout.page))
        if layout.trim is not None:
            click.echo(_rect_line("trim", layout.trim))
        if layout.safety is not None:
            click.echo(_rect_line("safety", layout.safety))
        if layout.gutter is not None:
            click.echo(_rect_line("gutter", layout.gutter))
        if layout.spine is not None:
            click.echo(_rect_line("spine", layout.spine))

    if viewport:
        zoom = fit_scale(fmt, *_parse_viewport(viewport), dpi=dpi or profile.dpi, margin=profile.fit_margin)
        click.echo(f"Fit scale for {viewport}: {zoom:.4f}")

    if out_path:
        template = assemble_template(fmt, [], name=template_name or profile.template_name, template_id=profile.template_id)
        save_template(template, out_path)
        click.echo(f"✅ Wrote template {out_path}")


if __name__ == "__main__":
    main()
