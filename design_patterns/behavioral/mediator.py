"""
Mediator Pattern - Chat Room
============================

Core Design: Users never talk to each other directly; a chat room mediator
routes every message, either to one recipient or to everyone else.

Participants:
1. Mediator Interface - Mediator
2. Concrete Mediator - ChatRoomMediator
3. Colleagues - ChatUser

Rules:
- User names are unique within a room, compared case-insensitively
- A user must join a room before sending
- Users cannot message themselves
- Broadcasts reach every member except the sender
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple


class Mediator(ABC):

    @abstractmethod
    def add_user(self, user: 'ChatUser') -> bool:
        pass

    @abstractmethod
    def send_message(self, message: str, sender: 'ChatUser',
                     to: Optional['ChatUser'] = None) -> int:
        pass


class ChatUser:

    def __init__(self, name: str):
        self.name = name
        self.mediator: Optional[Mediator] = None
        self.inbox: List[Tuple[str, str]] = []

    def send_message(self, message: str, to: Optional['ChatUser'] = None) -> bool:
        if self.mediator is None:
            print(f"[WARN][{self.name}] Tried to send a message but is not "
                  f"registered with a mediator.")
            return False

        if to is not None and to.name.lower() == self.name.lower():
            print(f"[WARN][{self.name}] Cannot send a message to oneself.")
            return False

        target = to.name if to is not None else "ALL"
        print(f"[SEND][{self.name}] -> {target}: \"{message}\"")
        self.mediator.send_message(message, self, to)
        return True

    def receive(self, message: str, sender: 'ChatUser'):
        self.inbox.append((sender.name, message))
        print(f"[RECEIVE][{self.name}] Message from {sender.name}: \"{message}\"")


class ChatRoomMediator(Mediator):

    def __init__(self):
        self._users: Dict[str, ChatUser] = {}

    def add_user(self, user: ChatUser) -> bool:
        key = user.name.lower()
        if key in self._users:
            print(f"[WARN] User \"{user.name}\" is already in the chat room.")
            return False
        self._users[key] = user
        user.mediator = self
        print(f"[INFO] {user.name} has joined the chat room.")
        return True

    def members(self) -> List[str]:
        return [user.name for user in self._users.values()]

    def send_message(self, message: str, sender: ChatUser,
                     to: Optional[ChatUser] = None) -> int:
        """Route a message, returns the number of users who received it"""
        if to is not None:
            receiver = self._users.get(to.name.lower())
            if receiver is None:
                print(f"[ERROR] User \"{to.name}\" not found in the chat room.")
                return 0
            print(f"[ROUTE] {sender.name} -> {to.name}")
            receiver.receive(message, sender)
            return 1

        delivered = 0
        for user in self._users.values():
            if user is not sender:
                user.receive(message, sender)
                delivered += 1
        return delivered


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("MEDIATOR PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    room = ChatRoomMediator()
    bob = ChatUser("Bob")
    alice = ChatUser("Alice")
    mike = ChatUser("Mike")

    print("1. Joining the room:")
    for user in (bob, alice, mike, ChatUser("bob")):
        room.add_user(user)
    print()

    print("2. Direct messages:")
    bob.send_message("Hi Alice!", alice)
    alice.send_message("Hey Bob, how are you?", bob)
    print()

    print("3. Broadcast:")
    mike.send_message("Hi everyone!")
    print()

    print("4. Invalid sends:")
    bob.send_message("Just a note to myself.", bob)
    ChatUser("Eve").send_message("Anyone there?")
    bob.send_message("Are you there?", ChatUser("Zed"))
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
