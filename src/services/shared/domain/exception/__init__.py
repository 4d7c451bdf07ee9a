from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    ExternalServiceException as ExternalServiceException,
)
from .exceptions import (
    OptimisticLockException as OptimisticLockException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    ValidationException as ValidationException,
)
