# src/native_compile/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- goal option defaults ---
DEFAULT_SKIP: bool = False
DEFAULT_SKIP_FOR_POM: bool = False
POM_PACKAGING: str = "pom"

# --- toolchain ---
ORACLE_GRAALVM_IDENTIFIER: str = "Oracle GraalVM"
# Older enterprise distributions announced themselves differently
LEGACY_ENTERPRISE_PATTERN: str = r"\bEE\b|Enterprise Edition"
DEFAULT_NATIVE_IMAGE_EXECUTABLE: str = "native-image"
DEFAULT_VERSION_TIMEOUT: float = 30.0  # seconds
UNKNOWN_MAJOR_VERSION: int = 0

# --- augmented SBOM ---
AUGMENTED_SBOM_PARAM_NAME: str = "augmentedSBOM"
SBOM_ENABLE_FLAG: str = "--enable-sbom"
SBOM_MIN_MAJOR_VERSION: int = 24

# --- sibling build steps ---
DEFAULT_PLUGIN_GROUP_ID: str = "org.apache.maven.plugins"
SHADE_PLUGIN_KEY: str = f"{DEFAULT_PLUGIN_GROUP_ID}:maven-shade-plugin"
ASSEMBLY_PLUGIN_KEY: str = f"{DEFAULT_PLUGIN_GROUP_ID}:maven-assembly-plugin"
JAR_PLUGIN_KEY: str = f"{DEFAULT_PLUGIN_GROUP_ID}:maven-jar-plugin"
