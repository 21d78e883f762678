# brighttask_recipes.py
# Tray Bright task runner. Run `brighttask` to see all available commands.
from __future__ import annotations
from brighttask.dsl import book, recipe, sh


def recipes():
    return book(
        recipe("default", sh("@brighttask --list"), doc="Default: list available recipes"),
        recipe("run", sh("cargo run"), doc="Run in debug mode"),
        recipe("build", sh("cargo build"), doc="Build debug"),
        recipe("release", sh("cargo build --release"), doc="Build optimized release binary"),

        # Installers, all built from the release binary
        recipe(
            "package-windows",
            sh("cargo packager --release --formats nsis"),
            needs=["release"],
            doc="Build Windows NSIS installer",
        ),
        recipe(
            "package-mac",
            sh("cargo packager --release --formats dmg"),
            needs=["release"],
            doc="Build macOS DMG installer",
        ),
        recipe(
            "package-linux",
            sh("cargo packager --release --formats deb,appimage"),
            needs=["release"],
            doc="Build Linux deb + AppImage",
        ),
        recipe(
            "package",
            sh("cargo packager --release"),
            needs=["release"],
            doc="Package for current platform",
        ),

        recipe("lint", sh("cargo clippy -- -D warnings"), doc="Run clippy lints"),
        recipe("fmt", sh("cargo fmt"), doc="Format code"),
        recipe("fmt-check", sh("cargo fmt -- --check"), doc="Check formatting without modifying"),
        recipe(
            "clean",
            sh("cargo clean"),
            sh("rm -rf dist"),
            doc="Clean build artifacts",
        ),
    )
