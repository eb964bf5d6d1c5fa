"""Runtime glue: pose sources/sinks, offset controller, chaperone, display."""
