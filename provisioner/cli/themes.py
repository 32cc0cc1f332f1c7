"""Terminal themes for the provisioner."""

from clicycle import Theme, Typography


def get_provisioning_theme():
    """Get a theme that keeps step warnings and failures readable on any background."""
    return Theme(
        typography=Typography(
            header_style="bold",
            section_style="bold",
            info_style="default",
            success_style="bold green",
            error_style="bold red",
            warning_style="bold yellow",
            muted_style="dim",
            value_style="default",
        ),
        width=80,
    )
