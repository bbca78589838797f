"""
State Pattern - Order Lifecycle
===============================

Core Design: An order delegates every action to its current state object;
states decide whether the action is allowed and which state comes next.

States:
- PaymentPendingState (initial)
- OrderPreparedState
- OrderShippedState
- CancelledOrderState

Transitions:
- Pending  --verify--> Prepared
- Pending  --cancel--> Cancelled
- Prepared --ship----> Shipped
- Prepared --cancel--> Cancelled
Every other action leaves the state unchanged and reports why.
"""

from abc import ABC, abstractmethod
from typing import List


class OrderState(ABC):

    def __init__(self, order: 'Order'):
        self.order = order

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def verify_payment(self) -> str:
        pass

    @abstractmethod
    def cancel_order(self) -> str:
        pass

    @abstractmethod
    def ship_order(self) -> str:
        pass


class PaymentPendingState(OrderState):

    def verify_payment(self) -> str:
        self.order.set_state(self.order.order_prepared_state)
        return "SUCCESS: Payment verified! Order will be prepared."

    def cancel_order(self) -> str:
        self.order.set_state(self.order.cancelled_order_state)
        return "CANCELLED: Order cancelled by user."

    def ship_order(self) -> str:
        return "ACTION DENIED: Cannot ship the order. Please verify payment first."


class OrderPreparedState(OrderState):

    def verify_payment(self) -> str:
        return "INFO: Payment was already verified."

    def cancel_order(self) -> str:
        self.order.set_state(self.order.cancelled_order_state)
        return "CANCELLED: Order cancelled. Changes will be applied."

    def ship_order(self) -> str:
        self.order.set_state(self.order.order_shipped_state)
        return "SUCCESS: Order shipped to customer."


class OrderShippedState(OrderState):

    def verify_payment(self) -> str:
        return "INFO: Payment already verified. Order is shipped."

    def cancel_order(self) -> str:
        return "ACTION DENIED: Cannot cancel. Order is already shipped."

    def ship_order(self) -> str:
        return "INFO: Order has already been shipped."


class CancelledOrderState(OrderState):

    def verify_payment(self) -> str:
        return "ACTION DENIED: Cannot verify payment. Order is cancelled."

    def cancel_order(self) -> str:
        return "INFO: Order has already been cancelled."

    def ship_order(self) -> str:
        return "ACTION DENIED: Cannot ship. Order is cancelled."


class Order:
    """Context - holds one instance of each state and the current one"""

    def __init__(self):
        self.payment_pending_state = PaymentPendingState(self)
        self.order_prepared_state = OrderPreparedState(self)
        self.order_shipped_state = OrderShippedState(self)
        self.cancelled_order_state = CancelledOrderState(self)
        self.current_state: OrderState = self.payment_pending_state
        self.history: List[str] = [self.current_state.name]

    @property
    def state_name(self) -> str:
        return self.current_state.name

    def set_state(self, state: OrderState):
        self.current_state = state
        self.history.append(state.name)
        print(f"STATE CHANGED: {state.name}")

    def verify_payment(self) -> str:
        return self._report(self.current_state.verify_payment())

    def cancel_order(self) -> str:
        return self._report(self.current_state.cancel_order())

    def ship_order(self) -> str:
        return self._report(self.current_state.ship_order())

    @staticmethod
    def _report(message: str) -> str:
        print(message)
        return message


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("STATE PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Order that gets cancelled before payment:")
    order = Order()
    order.ship_order()
    order.cancel_order()
    order.verify_payment()
    order.ship_order()
    print()

    print("2. Happy path:")
    order = Order()
    order.verify_payment()
    order.ship_order()
    order.cancel_order()
    print(f"History: {' -> '.join(order.history)}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
