"""Reset the vendor directory and copy in the windowing library's C sources.

``go mod vendor`` leaves out directories holding no Go files, so the C
sources of the windowing library are copied in from the module cache
afterwards. Must be run from the project root.
"""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Optional, Sequence

GO_MOD_FILE = "go.mod"
GO_MOD_VENDOR_FILE = os.path.join("vendor", "modules.txt")
GLFW_MOD = "github.com/go-gl/glfw"
GLFW_MOD_SRC_DIR = "v3.2/glfw/glfw"


class ModVendorError(Exception):
    """Raised when vendored sources cannot be read or copied."""


def _default_gopath() -> str:
    gopath = os.environ.get("GOPATH")
    if gopath:
        return gopath
    return os.path.join(os.path.expanduser("~"), "go")


def cache_mod_path(
    lines: Iterable[str], module: str, gopath: Optional[str] = None
) -> Optional[str]:
    """Return the module cache path of ``module`` as listed in a modules file.

    Lines have the form ``# <module> <version>``. Returns None when the module
    is not listed.
    """
    if gopath is None:
        gopath = _default_gopath()
    try:
        for line in lines:
            fields = line.rstrip("\n").rstrip("\r").split(" ")
            if len(fields) != 3 or fields[1] != module:
                continue
            module_version = f"{module}@{fields[2]}"
            return os.path.normpath(os.path.join(gopath, "pkg", "mod", module_version))
    except (OSError, UnicodeDecodeError) as exc:
        raise ModVendorError(f"Cannot read content: {exc}") from exc
    return None


def _ensure_dir(directory: Path) -> None:
    if not directory.exists():
        directory.mkdir(mode=0o755)


def _copy_file(src: Path, target: Path, mode: int = 0o644) -> None:
    # The target is opened without truncation, as the vendoring tool always did.
    with src.open("rb") as source:
        fd = os.open(target, os.O_RDWR | os.O_CREAT, mode)
        with os.fdopen(fd, "wb") as dest:
            shutil.copyfileobj(source, dest)


def recursive_copy(src, target) -> None:
    """Copy the directory tree at ``src`` into ``target``."""
    src, target = Path(src), Path(target)
    try:
        entries = sorted(src.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise ModVendorError(f"Cannot read dir {src}: {exc}") from exc
    _ensure_dir(target)

    for entry in entries:
        destination = target / entry.name
        if entry.is_dir():
            recursive_copy(entry, destination)
        else:
            _copy_file(entry, destination)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the vendoring steps in the current directory; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="modvendor",
        description="Reset vendor content and copy the windowing library C sources.",
    )
    parser.parse_args(argv)

    wd = Path.cwd()
    if not (wd / GO_MOD_FILE).exists():
        print("This program must be invoked in the project root")
        return 1

    print("Reset vendor content using 'go mod vendor'")
    try:
        subprocess.run(
            ["go", "mod", "vendor", "-v"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        print(exc)
        return 1

    print(f"Parsing {GO_MOD_VENDOR_FILE} to detect dependency module path for {GLFW_MOD}")
    try:
        with (wd / GO_MOD_VENDOR_FILE).open(encoding="utf-8") as modules:
            glfw_mod_path = cache_mod_path(modules, GLFW_MOD)
    except OSError as exc:
        print(f"Cannot open {GO_MOD_VENDOR_FILE}: {exc}")
        return 1
    except ModVendorError as exc:
        print(f"Cannot read {GO_MOD_VENDOR_FILE}: {exc}")
        return 1
    if glfw_mod_path is None:
        print(f"Cannot found module {GLFW_MOD} in {GO_MOD_VENDOR_FILE}")
        return 1
    print(f"Package module path: {glfw_mod_path}")

    glfw_src = Path(glfw_mod_path) / GLFW_MOD_SRC_DIR
    glfw_target = wd / "vendor" / GLFW_MOD / GLFW_MOD_SRC_DIR
    print(f"Copying glfw c source code: {glfw_src} -> {glfw_target}")
    try:
        recursive_copy(glfw_src, glfw_target)
    except (ModVendorError, OSError) as exc:
        print(f"Cannot copy glfw c source code: {exc}")
        return 1

    print("All set. To test using vendor dependencies: go test ./... -mod=vendor -v -count=1")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())