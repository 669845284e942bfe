"""dumpvalue -- Export named CI values to standalone XML documents.

This package carries two small pieces of a continuous-integration engine:
a parser for ``projectPlugins`` configuration blocks and the ``dumpValue``
build task, which writes a list of named values to a UTF-8 XML file with
each value either wrapped in a CDATA block or stored as escaped text.

Typical workflow::

    dumpvalue run --config ccnet.config    # execute every <dumpValue> task
    dumpvalue write out.xml Build=42       # export ad-hoc values
    dumpvalue show out.xml                 # read a dump file back

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the package.
    config: Configuration file resolution and XDG data directory.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    export: Document model, serializer, and atomic writer.
"""

__version__ = "0.1.0"
