class Templates:
    """Шаблоны для генерации TypeScript файла"""

    preamble = """// Response Generics

type DataResponse<D> = { data: D; error: undefined; response: Response; };
type ErrorResponse<E> = { data: undefined; error: E; response: Response; };
type FetchResponse<D, E> = DataResponse<D> | ErrorResponse<E>;

// Per-call overrides accepted by every request
type RequestInitExtended = {
    baseUrl?: string;
    fetch?: (input: Request) => Promise<Response>;
    parseAs?: "json" | "text" | "blob" | "arrayBuffer" | "formData";

    // local body serializer -- customize how the body is serialized before sending
    bodySerializer?: (body: any) => BodyInit | null;

    // local query serializer -- i.e. {foo: [1,2,3,4]} => ?foo=1;2;3;4
    querySerializer?: (query: any) => string;
};

/*
    One generic function per method type, backed by a lookup table from url to payload.
    Overloads type check the same way, but editor intellisense gets confused as to which
    overload you want and stops listing request body properties.

    With generics, allowing both init and init? in the same signature needs the two helpers below.
*/

// https://stackoverflow.com/questions/52984808/is-there-a-way-to-get-all-required-properties-of-a-typescript-object
// Example: OptionalKeys<{a: string, b?: number}> = "b"
type OptionalKeys<T extends object> = keyof { [K in keyof T as {} extends Pick<T, K> ? K : never]: any }

// https://stackoverflow.com/questions/77714794/how-to-use-void-to-make-function-parameters-optional-when-using-generics
// GET(url, init?) if init is optional, and GET(url, init) if init is required
type ClientMethod<Lookup extends Record<string, any>> = <Url extends keyof Lookup>(
    url: Url,
    ...[init]: "init" extends OptionalKeys<Lookup[Url]> ? [init?: Lookup[Url]["init"]] : [init: Lookup[Url]["init"]]
) => Lookup[Url]["response"];"""

    component_types_header = "// Component types"

    operation_types_header = "// Request/Response types"

    url_types_header = "// URL types"

    lookups_header = """// Generics Type Lookups
// These are lookup tables for each method type (GET, POST, etc) to match the url to its payload"""

    lookup_entry = (
        '"{path}": {{ init{optional}: {request}, '
        "response: FetchResponse<{data}, {error}> }}"
    )

    client_interface = """export interface Client {{
{methods}
}}"""


templates = Templates()
