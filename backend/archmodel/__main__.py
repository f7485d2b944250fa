"""
Build a sample workspace and publish it.

    python -m archmodel                      # build + upload smart_mobility
    python -m archmodel --output ws.json     # build + write JSON, no upload
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from archmodel import config
from archmodel.export.config import get_structurizr_client, get_workspace_id
from archmodel.export.serializers import serialize_workspace
from archmodel.model.errors import ArchitectureModelError
from archmodel.samples import DEFAULT_SAMPLE, SAMPLE_WORKSPACES


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="archmodel",
        description="Build an architecture workspace and publish it to the diagramming service",
    )
    p.add_argument("--sample", choices=sorted(SAMPLE_WORKSPACES), default=DEFAULT_SAMPLE,
                   help="Which workspace to build.")
    p.add_argument("-o", "--output", type=Path, default=None,
                   help="Write the workspace JSON here instead of uploading it.")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        workspace = SAMPLE_WORKSPACES[args.sample]()

        if args.output:
            args.output.write_text(
                json.dumps(serialize_workspace(workspace), indent=2), encoding="utf-8"
            )
            print(f"✅ Wrote {workspace.name} to {args.output}")
            return 0

        workspace_id = get_workspace_id()
        get_structurizr_client().put_workspace(workspace_id, workspace)
    except ArchitectureModelError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"✅ Published {workspace.name} to workspace {workspace_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
