from .descriptor import Kind as Kind
from .dispatch import DynamicDispatchTarget as DynamicDispatchTarget
from .dispatch import DynamicDispatchType as DynamicDispatchType
from .errors import InvalidDescriptorError as InvalidDescriptorError
from .errors import InvocableError as InvocableError
from .errors import UnresolvedCallableError as UnresolvedCallableError
from .handle import CallableHandle as CallableHandle
from .registry import handle as handle
from .registry import lookup as lookup
from .registry import register as register
