"""Basic library usage.

Runs a hunt over a directory of jar files exactly as the command line
does: dependency.xml and error.xml are written to the working directory
and each found file is printed to the console.
"""

from jarhunt import HuntConfig, RichReporter, hunt


config = HuntConfig(root="lib", recursive=True)

summary = hunt(config, reporter=RichReporter())

print(f"Resolved {summary.resolved} of {summary.discovered} jar files")
if summary.unresolved:
    print(f"See {config.error_xml} for {summary.unresolved} unresolved files")
