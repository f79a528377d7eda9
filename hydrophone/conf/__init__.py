from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_CONFORMANCE_IMAGE = "registry.k8s.io/conformance:v1.28.0"
DEFAULT_BUSYBOX_IMAGE = "registry.k8s.io/e2e-test-images/busybox:1.36.1-1"
DEFAULT_PARALLEL = 1
DEFAULT_VERBOSITY = 4


@dataclass(frozen=True)
class Config:
    """Config is the immutable configuration of a conformance run.
    It contains the following fields:
    - focus: Regex of the e2e tests to run, e.g. '[Conformance]' or 'sig-auth'
    - skip: Regex of the e2e tests to skip
    - conformance_image: Conformance container image, see registry.k8s.io/conformance for the available tags
    - busybox_image: Busybox image used by test workloads, for clusters pulling from their own registry
    - kubeconfig: Path to the kubeconfig file, None to use in-cluster or default config
    - parallel: Number of parallel threads in the test framework
    - verbosity: Verbosity of the test framework
    - output_dir: Directory where e2e.log and junit_01.xml are saved
    - log_level: Log level of hydrophone itself
    - log_file: Log File path
    """

    focus: str
    output_dir: str
    skip: str = ""
    conformance_image: str = DEFAULT_CONFORMANCE_IMAGE
    busybox_image: str = DEFAULT_BUSYBOX_IMAGE
    kubeconfig: Optional[str] = None
    parallel: int = DEFAULT_PARALLEL
    verbosity: int = DEFAULT_VERBOSITY
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def test_environment(self) -> Dict[str, str]:
        """Environment handed to the conformance container"""
        env = {
            "E2E_FOCUS": self.focus,
            "E2E_PARALLEL": str(self.parallel),
            "E2E_VERBOSITY": str(self.verbosity),
        }
        if self.skip:
            env["E2E_SKIP"] = self.skip
        return env
