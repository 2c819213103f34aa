# =============================================================================
# main.py  —  Entry Point for the KYC Analyst Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the kyc-analyst script)
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/kyc_agent.py), which spawns the
#      Tool Gateway (tools/mcp_server.py) over stdio
#   2. Opens an in-memory session
#   3. Reads a request from the terminal, e.g.
#        "Run a full KYC check on Jane Doe, born 1985-04-12,
#         document https://example.test/id/jane.pdf"
#   4. Streams the agent's events, printing each tool call
#   5. Prints the final assessment
#
# The backend itself must be reachable at API_BASE (default
# http://localhost:8080).
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads its provider key (OPENROUTER_API_KEY, ...) from the
# environment when the agent is created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.kyc_agent import create_agent

APP_NAME = "kyc_analyst"
USER_ID = "analyst"


async def run_agent():
    """Run the KYC analyst agent interactively until the user quits."""
    print("=" * 70)
    print("  KYC ANALYST AGENT")
    print("  Google ADK + LiteLlm + FastMCP tool gateway")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Describe the customer to review (name, birth date, document).")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is working...\n")
        print("-" * 70)

        # Keep the last text part; tool calls are echoed as they happen.
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if hasattr(part, "text") and part.text:
                        final_response = part.text

                    if hasattr(part, "function_call") and part.function_call:
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


def main() -> None:
    asyncio.run(run_agent())


if __name__ == "__main__":
    main()
