from .user import User, ProfileField, ProfilePatch, build_profile_patches
from .token_claims import TokenClaims

__all__ = ["User", "ProfileField", "ProfilePatch", "build_profile_patches", "TokenClaims"]
