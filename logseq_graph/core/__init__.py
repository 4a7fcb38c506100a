"""Core operations behind the MCP tools.

Each operation takes a :class:`~logseq_graph.client.LogseqClient`, performs the
remote call(s) and returns the rendered response text. Failures are raised as
:class:`~logseq_graph.exceptions.LogseqError` subclasses.
"""
