"""Library layer behind the ``fip`` CLI.

- fipctl.lib.client: FipClient, the floating-IP API client
- fipctl.lib.filters: ``name=value`` filter parsing
- fipctl.lib.core: config, paths, version
- fipctl.lib.util: logging helpers
"""
