from fast_seed import Seeder


class NewClass(Seeder):
    async def run(self) -> None:
        # Insert seed data through self.db, e.g.
        # await self.db["users"].insert_one({"name": self.faker().name()})
        pass
