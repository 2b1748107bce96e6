"""
Player state and management.
"""

BANKRUPT_STATUS = "*** bankrupt ***"
IN_PLAY_STATUS = "in play"


class PlayerState:
    """
    Money, position and suspension of a single player.

    A player is active, suspended for a number of turns, or bankrupt.
    Bankruptcy is terminal: money stays at zero and credits are refused.
    """

    def __init__(self, name: str, starting_money: int = 1000):
        self._name = name
        self.money = starting_money
        self.field = 0
        self.suspension = 0
        self.is_bankrupt = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_waiting(self) -> bool:
        return self.suspension > 0

    @property
    def status(self) -> str:
        """Status label shown on the scoreboard."""
        if self.is_bankrupt:
            return BANKRUPT_STATUS
        if self.is_waiting:
            return f"*** waiting: {self.suspension} ***"
        return IN_PLAY_STATUS

    def wait_if_needed(self) -> None:
        """Count down one turn of suspension, if any."""
        if self.suspension > 0:
            self.suspension -= 1

    def suspend(self, turns: int) -> None:
        self.suspension = turns

    def move(self, field: int) -> None:
        self.field = field

    def pay(self, amount: int) -> int:
        """
        Debit ``amount`` from the player.

        If the player cannot afford it, all remaining money is collected
        and the player goes bankrupt.

        Returns:
            The amount actually collected.
        """
        if self.money >= amount:
            self.money -= amount
            return amount

        collected = self.money
        self.money = 0
        self.is_bankrupt = True
        return collected

    def take(self, amount: int) -> bool:
        """
        Credit ``amount`` to the player.

        Returns:
            False if the player is bankrupt and the money was refused.
        """
        if self.is_bankrupt:
            return False
        self.money += amount
        return True

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', money={self.money}, "
            f"field={self.field}, suspension={self.suspension}, bankrupt={self.is_bankrupt})"
        )
