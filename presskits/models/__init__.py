from .organization import Organization
from .media_kit import MediaKit
from .instruction import MediaKitInstruction
# base and mixins are imported by the above as needed
