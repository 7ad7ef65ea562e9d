"""GraphQL documents for the Aave subgraph."""

# Positions currently holding the token, with everything needed to decide
# dead status in one round trip. Ordered by balance so skip-pagination is
# deterministic.
DEAD_LIQUIDITY_CANDIDATES_QUERY = """
query getDeadLiquidityUsers(
  $tokenAddress: Bytes!
  $cutoff: Int!
  $first: Int!
  $skip: Int!
  $lookback: Int!
) {
  userReserves(
    where: {
      currentATokenBalance_gt: "0"
      reserve_: { underlyingAsset: $tokenAddress }
    }
    orderBy: currentATokenBalance
    orderDirection: desc
    first: $first
    skip: $skip
  ) {
    id
    currentATokenBalance
    scaledATokenBalance
    lastUpdateTimestamp
    user {
      id
      reserves(where: { currentStableDebt_gt: "0" }) {
        id
      }
      variableDebtReserves: reserves(where: { currentVariableDebt_gt: "0" }) {
        id
      }
      recentSupplies: supplyHistory(where: { timestamp_gte: $cutoff }, first: 1) {
        id
      }
      recentWithdrawals: redeemUnderlyingHistory(
        where: { timestamp_gte: $cutoff }
        first: 1
      ) {
        id
      }
      recentBorrows: borrowHistory(where: { timestamp_gte: $cutoff }, first: 1) {
        id
      }
      recentRepays: repayHistory(where: { timestamp_gte: $cutoff }, first: 1) {
        id
      }
      historicalTokenSupplies: supplyHistory(
        where: {
          timestamp_lt: $cutoff
          reserve_: { underlyingAsset: $tokenAddress }
        }
        first: 1
      ) {
        id
        timestamp
      }
      historicalBorrows: borrowHistory(
        where: { timestamp_lt: $cutoff }
        orderBy: timestamp
        orderDirection: desc
        first: $lookback
      ) {
        id
        timestamp
        amount
        reserve { symbol }
      }
      historicalRepays: repayHistory(
        where: { timestamp_lt: $cutoff }
        orderBy: timestamp
        orderDirection: desc
        first: $lookback
      ) {
        id
        timestamp
        amount
        reserve { symbol }
      }
    }
    reserve {
      id
      symbol
      decimals
      underlyingAsset
      liquidityIndex
      pool { id }
    }
  }
}
"""

# Current scaled balance and index, plus the latest balance record at or
# before the cutoff.
USER_RESERVES_HISTORY_QUERY = """
query getUserReservesHistory($userReserveIds: [String!]!, $cutoff: Int!) {
  userReserves(where: { id_in: $userReserveIds }) {
    id
    scaledATokenBalance
    reserve {
      liquidityIndex
      decimals
    }
    historicalBalance: aTokenBalanceHistory(
      where: { timestamp_lte: $cutoff }
      orderBy: timestamp
      orderDirection: desc
      first: 1
    ) {
      timestamp
      scaledATokenBalance
      index
    }
  }
}
"""
