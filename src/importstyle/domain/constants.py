from __future__ import annotations

"""
Domain Constants and Static Tables.

Provides the fixed tables that drive the import style rules: directory
exclusions, existence-check exemptions, internal module families and the
preprocessor markers recognised by the line classifier.
"""

from typing import Tuple

# Path of this tool relative to the repository root. Used as the root marker.
ROOT_MARKER = "scripts/check_imports.py"

SOURCE_EXTENSIONS: Tuple[str, ...] = (".h", ".m", ".mm", ".c")

# -----------------------------------------------------------------------------
# PATH FILTERS
# -----------------------------------------------------------------------------

# Imports should only be repo-relative in libraries and unit tests.
SKIP_DIR_PATTERNS: Tuple[str, ...] = (
    "/Sample/",
    "/Pods/",
    "FirebaseStorage/Tests/Integration",
    "FirebaseInAppMessaging/Tests/Integration/",
    "Example/InstanceID/App",
    "SymbolCollisionTest/",
    "/gen/",
    "CocoapodsIntegrationTest/",
    "CoreOnly/Sources",  # Firebase.h umbrella
    # Pending a first pass over the remaining products:
    "FirebaseABTesting",
    "FirebaseAppDistribution",
    "FirebaseCore/Sources/Private",
    "FirebaseDynamicLinks",
    "Firebase/CoreDiagnostics",
    "FirebaseDatabase/Sources/third_party/Wrap-leveldb",
    "Example",
    "FirebaseInAppMessaging",
    "FirebaseInstallations/Source/Tests/Unit/",
    "Firebase/InstanceID",
    "FirebaseMessaging",
    "FirebaseRemoteConfig",
    "Firestore",
    "GoogleUtilitiesComponents",
)

PUBLIC_SEGMENT = "/Public/"

# TODO: move GDTCOREvent+GDTCCTSupport.h out of Public/ and drop this entry.
LEGACY_PUBLIC_EXCEPTIONS: Tuple[str, ...] = (
    "GDTCCTLibrary/Public/GDTCOREvent+GDTCCTSupport.h",
)

# -----------------------------------------------------------------------------
# IMPORT RULES
# -----------------------------------------------------------------------------

# Targets starting with these are not required to exist in the repo.
SKIP_IMPORT_PATTERNS: Tuple[str, ...] = (
    "FBLPromise",
    "OCMock",
)

INTERNAL_MODULE_PREFIXES: Tuple[str, ...] = (
    "Firebase",
    "GoogleUtilities",
    "GoogleDataTransport",
)

# -----------------------------------------------------------------------------
# LINE MARKERS
# -----------------------------------------------------------------------------

CONDITIONAL_BEGIN_MARKER = "#if SWIFT_PACKAGE"
CONDITIONAL_ELSE_MARKER = "#else"
CONDITIONAL_END_MARKER = "#endif"

MODULE_IMPORT_MARKER = "@import"
INCLUDE_MARKERS: Tuple[str, ...] = ("#import", "#include")
