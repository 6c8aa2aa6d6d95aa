"""Built-in catalog of vendor-proprietary JDK feature probes.

Each entry declares its own expected-absence rules. Thresholds differ per
feature and are not derived from one global cut-off:

==========================  ==========================================  =======  =======
Probe                       What it checks                              Vendors  Removal
==========================  ==========================================  =======  =======
kcms                        KCMS color management provider              oracle   9
font-engine                 sun.font.FontManagerFactory                 oracle   -
font-utilities              sun.font.FontUtilities                      oracle   -
direct-memory               sun.misc.Unsafe                             -        -
hotspot-diagnostic-bean     com.sun.management.HotSpotDiagnosticMXBean  -        -
hotspot-internal-beans      sun.management.ManagementFactoryHelper      oracle   -
flight-recorder             jdk.jfr.Recording                           -        -
commercial-features         -XX:+UnlockCommercialFeatures               -        11
sun-security-provider       sun.security.provider.Sun                   -        -
hotspot-compiler-property   sun.management.compiler system property     -        -
==========================  ==========================================  =======  =======
"""

from __future__ import annotations

from compatprobe.core.probes import Probe, ProbeRegistry, make_probe
from compatprobe.probes.actions import (
    java_class_probe,
    java_option_probe,
    java_property_probe,
)


def builtin_probes(java_home: str | None = None) -> list[Probe]:
    """Return the built-in probes bound to the JDK at *java_home*.

    Args:
        java_home: JDK installation directory; None uses tools on ``PATH``.

    Returns:
        Probes in presentation order.
    """
    return [
        make_probe(
            "kcms",
            java_class_probe("sun.java2d.cmm.kcms.KcmsServiceProvider", java_home),
            expected_failure_vendors={"oracle"},
            min_version_for_removal=9,
            description="Kodak Color Management System provider",
        ),
        make_probe(
            "font-engine",
            java_class_probe("sun.font.FontManagerFactory", java_home),
            expected_failure_vendors={"oracle"},
            description="Proprietary font manager factory",
        ),
        make_probe(
            "font-utilities",
            java_class_probe("sun.font.FontUtilities", java_home),
            expected_failure_vendors={"oracle"},
            description="Proprietary font utility class",
        ),
        make_probe(
            "direct-memory",
            java_class_probe("sun.misc.Unsafe", java_home),
            description="Direct off-heap memory access via sun.misc.Unsafe",
        ),
        make_probe(
            "hotspot-diagnostic-bean",
            java_class_probe("com.sun.management.HotSpotDiagnosticMXBean", java_home),
            description="HotSpot diagnostic management bean",
        ),
        make_probe(
            "hotspot-internal-beans",
            java_class_probe("sun.management.ManagementFactoryHelper", java_home),
            expected_failure_vendors={"oracle"},
            description="HotSpot internal management factory",
        ),
        make_probe(
            "flight-recorder",
            java_class_probe("jdk.jfr.Recording", java_home),
            description="Java Flight Recorder API",
        ),
        make_probe(
            "commercial-features",
            java_option_probe("-XX:+UnlockCommercialFeatures", java_home),
            min_version_for_removal=11,
            description="Oracle commercial VM feature flag",
        ),
        make_probe(
            "sun-security-provider",
            java_class_probe("sun.security.provider.Sun", java_home),
            description="SUN cryptographic provider",
        ),
        make_probe(
            "hotspot-compiler-property",
            java_property_probe("sun.management.compiler", java_home),
            description="HotSpot JIT compiler system property",
        ),
    ]


def default_registry(java_home: str | None = None) -> ProbeRegistry:
    """Create a ProbeRegistry pre-loaded with the built-in JDK probes.

    Returns:
        A ProbeRegistry with every probe of ``builtin_probes()`` registered.
    """
    registry = ProbeRegistry()
    for probe in builtin_probes(java_home):
        registry.register(probe)
    return registry
