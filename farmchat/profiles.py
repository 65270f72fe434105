from farmchat.schema import FarmerProfile

class FarmerNotFound(LookupError):
    def __init__(self, email: str):
        super().__init__(f"no farmer registered with email {email!r}")
        self.email = email

class ProfileLookup:
    """Reads farmer profiles from the Mongo ``farmers`` collection."""

    def __init__(self, farmers):
        self.farmers = farmers

    async def lookup(self, email: str) -> FarmerProfile:
        doc = await self.farmers.find_one({"email": email})
        if not doc:
            raise FarmerNotFound(email)
        return FarmerProfile.from_document(doc)
