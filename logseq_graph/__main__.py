"""Allow ``python -m logseq_graph``."""

from logseq_graph import run_server

run_server()
