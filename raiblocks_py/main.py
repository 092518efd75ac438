import asyncio
import logging

from raiblocks_py.extended import RaiSession
from raiblocks_py.shared.configuration import ClientConfiguration
from raiblocks_py.shared.rai_utils import Denomination


async def main():
    logging.basicConfig(level=logging.INFO)
    session = RaiSession(configuration=ClientConfiguration("localhost"))

    res = await session.initialize()
    if not res:
        return
    snapshot = res.payload
    print(f"Blocks: {snapshot.block_count}, accounts: {snapshot.frontier_count}")

    supply = await session.node_service.available_supply(Denomination.MEGA_RAI)
    print(f"Available supply: {supply.unwrap_or('unknown')} Mrai")


if __name__ == "__main__":
    asyncio.run(main())
