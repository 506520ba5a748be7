class RaffleError(RuntimeError):
    code = "RaffleError"


class Conflict(RaffleError):
    code = "Conflict"


class ChainStuck(RaffleError):
    code = "ChainStuck"

    def __init__(self, spinner_id: str) -> None:
        super().__init__(f"No available recipients for participant {spinner_id}. The chain is stuck.")
        self.spinner_id = spinner_id


class Unauthorized(RaffleError):
    code = "Unauthorized"

    def __init__(self) -> None:
        super().__init__("Incorrect admin password.")


class DuplicateName(RaffleError):
    code = "DuplicateName"

    def __init__(self, name: str) -> None:
        super().__init__(f"Participant {name} already exists.")
        self.name = name


class ParticipantNotFound(RaffleError):
    code = "ParticipantNotFound"

    def __init__(self, participant_id: str) -> None:
        super().__init__(f"Participant {participant_id} does not exist.")
        self.participant_id = participant_id


class StorageUnavailable(RaffleError):
    code = "StorageUnavailable"
