from .compose import ComposeRunWrapper, DockerContextWrapper, DockerVersionWrapper
from .rfc2217 import InstallerWrapper, Rfc2217ServerWrapper
