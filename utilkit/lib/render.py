"""
Template file rendering.

Every file under `inputdir` that matches a glob is read as UTF-8, passed
through the placeholder resolver, and written to the same relative path under
`outputdir`. A file that fails to decode or to copy across, or that lies
outside `inputdir`, is skipped and logged; the rest of the run carries on.
"""

from pathlib import Path
from utilkit.lib.log import LOG
from utilkit.lib.placeholder import PlaceholderResolver, envVars_replace
from utilkit.models.dataModel import RenderResult


def files_render(
    inputdir: Path,
    outputdir: Path,
    pattern: str = "**/*",
    resolver: PlaceholderResolver | None = None,
) -> RenderResult:
    """Render all matching files from inputdir into outputdir.

    Args:
        inputdir: Directory containing template files
        outputdir: Directory receiving rendered files
        pattern: Glob, relative to inputdir, selecting the files to render
        resolver: Placeholder resolver; the default resolver when None

    Returns:
        RenderResult listing rendered and skipped relative paths
    """
    result: RenderResult = RenderResult()
    for input_file in sorted(inputdir.glob(pattern)):
        if not input_file.is_file():
            continue
        try:
            relative: Path = input_file.relative_to(inputdir)
        except ValueError:
            relative = input_file
        if relative.is_absolute() or ".." in relative.parts:
            LOG(f"Skipping file outside {inputdir}: {input_file}", level="WARNING")
            result.skipped.append(str(input_file))
            continue

        try:
            content: str = input_file.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            LOG(f"Skipping non UTF-8 file: {input_file}")
            result.skipped.append(str(relative))
            continue
        except OSError as e:
            LOG(f"Skipping unreadable file {input_file}: {e}", level="WARNING")
            result.skipped.append(str(relative))
            continue

        output_file: Path = outputdir / relative
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(envVars_replace(content, resolver), encoding="utf-8")
        except OSError as e:
            LOG(f"Failed to write {output_file}: {e}", level="WARNING")
            result.skipped.append(str(relative))
            continue
        result.rendered.append(str(relative))

    return result
