"""Resource type names the export scope resolver acts on."""


class KnownResourceTypes:
    """Resource types with special meaning during group expansion.

    Members of any other type are ignored: only individuals are part of an
    exported population, and nested groups are expanded.
    """

    GROUP = "Group"
    PATIENT = "Patient"
